from .service import AbstractAsyncManager
import threading


class WorkerThread(threading.Thread):
    """
    A thread that keeps the result (or the exception) of its target
    """
    def __init__(self, func, args=(), kwargs=None, name=None):
        super(WorkerThread, self).__init__(name=name, daemon=True)
        self.func = func
        self.func_args = args
        self.func_kwargs = kwargs or {}
        self.value = None
        self.exception = None

    def run(self):
        try:
            self.value = self.func(*self.func_args, **self.func_kwargs)
        except Exception as e:
            self.exception = e

    def get(self):
        self.join()
        if self.exception is not None:
            raise self.exception
        return self.value


class AsyncManager(AbstractAsyncManager):
    """
    One OS thread per spawned worker
    """
    def __init__(self):
        self._threads = []
        self._count = 0

    def spawn(self, func, *args, **kwargs):
        self._count += 1
        thread = WorkerThread(func, args, kwargs, name="mandelq-worker-%d" % self._count)
        self._threads.append(thread)
        thread.start()
        return thread

    def join(self, workers):
        for worker in workers:
            worker.join()
        self._threads = [t for t in self._threads if t.is_alive()]

    def lock(self, *args, **kwargs):
        return threading.Lock()

    def do_stop(self):
        self.join(list(self._threads))
