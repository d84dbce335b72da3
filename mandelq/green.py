from .service import AbstractAsyncManager
import gevent
import gevent.threadpool
import threading


class AsyncManager(AbstractAsyncManager):
    """
    Runs workers on a gevent native thread pool, so the hub keeps
    serving other greenlets while a render is in flight
    """
    maxsize = 64

    def __init__(self):
        self._pool = gevent.threadpool.ThreadPool(self.maxsize)

    def spawn(self, func, *args, **kwargs):
        """Run `func` on a pool thread, returns an AsyncResult"""
        return self._pool.spawn(func, *args, **kwargs)

    def join(self, workers):
        gevent.wait(workers)

    def lock(self, *args, **kwargs):
        # workers are native threads, a gevent lock would not guard them
        return threading.Lock()

    def do_stop(self):
        self._pool.join()
        self._pool.kill()
