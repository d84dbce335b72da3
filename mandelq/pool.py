from .resolver import resolve
from .scheduler import RowScheduler
from .utils import log_tb
import logging
import time

log = logging.getLogger(__name__)


class WorkerReport(object):
    """
    What one worker did during a run
    """
    def __init__(self, worker):
        self.worker = worker
        self.rows = []
        self.duration = None

    def __repr__(self):
        return "<WorkerReport %s rows=%d duration=%s>" % (self.worker, len(self.rows), self.duration)


class WorkerPool(object):
    """
    A fixed number of workers that drain a `RowScheduler`.

    `run` blocks until every worker has found the scheduler empty.
    """
    def __init__(self, workers, async_manager='mandelq.threads.AsyncManager'):
        self.workers = workers
        self.async_manager = resolve(async_manager)
        if isinstance(self.async_manager, type):
            self.async_manager = self.async_manager()

    def scheduler(self, height):
        return RowScheduler(height, lock=self.async_manager.lock())

    def work(self, worker, scheduler, task):
        report = WorkerReport(worker)
        start = time.time()
        with log_tb(log, raise_err=True):
            for row in scheduler:
                task(row)
                report.rows.append(row)
        report.duration = time.time() - start
        log.debug("worker %s finished %d rows in %.3fs", worker, len(report.rows), report.duration)
        return report

    def run(self, scheduler, task):
        """
        Call `task(row)` once for every row `scheduler` hands out and
        return one `WorkerReport` per worker
        """
        handles = [self.async_manager.spawn(self.work, num, scheduler, task)
                   for num in range(self.workers)]
        self.async_manager.join(handles)
        return [handle.get() for handle in handles]

    def stop(self):
        self.async_manager.do_stop()
