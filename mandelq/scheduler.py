import threading


class RowScheduler(object):
    """
    Hands out image rows to workers, each row exactly once.

    The cursor only moves forward; once it reaches `height` every
    further claim comes back empty.
    """
    def __init__(self, height, lock=None):
        self.height = height
        self.next_row = 0
        if lock is None:
            lock = threading.Lock()
        self.lock = lock

    def claim(self):
        """
        Reserve the next row, or return None when all rows are taken
        """
        with self.lock:
            if self.next_row >= self.height:
                return None
            row = self.next_row
            self.next_row += 1
        return row

    def __iter__(self):
        while True:
            row = self.claim()
            if row is None:
                return
            yield row

    @property
    def remaining(self):
        with self.lock:
            return max(self.height - self.next_row, 0)

    @property
    def exhausted(self):
        return self.remaining == 0
