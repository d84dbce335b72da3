from contextlib import contextmanager
from functools import partial
import sys
import time


class MandelqError(Exception):
    """
    Base class for mandelq failures
    """


@contextmanager
def log_tb(logger, raise_err=False):
    try:
        yield
    except Exception as e:
        logger.error(e, exc_info=True)
        if raise_err:
            raise


def puts(text, stream=None):
    if stream is None:
        stream = sys.stdout
    stream.write(text)
    stream.flush()


@contextmanager
def msg(text, printer=puts):
    """
    Print `text`, run the block, then report how it went and how long
    it took
    """
    printer("%s... " % text)
    start = time.time()
    try:
        yield
    except Exception:
        printer("failed\n")
        raise
    printer("done (%.2fs)\n" % (time.time() - start))


class AttrAttr(object):
    """
    A descriptor for proxying an attribute of an attribute
    """
    def __init__(self, parent, attr):
        self.parent = parent
        self.attr = attr

    def __get__(self, obj, type=None):
        parent = getattr(obj, self.parent)
        return getattr(parent, self.attr)


app_attr = partial(AttrAttr, 'app')


class reify(object):
    #@@ from pyramid
    """ Use as a class method decorator.  It operates almost exactly like the
    Python ``@property`` decorator, but it puts the result of the method it
    decorates into the instance dict after the first call, effectively
    replacing the function it decorates with an instance variable.
    """
    def __init__(self, wrapped):
        self.wrapped = wrapped
        self.__doc__ = getattr(wrapped, '__doc__', None)

    def __get__(self, inst, objtype=None):
        if inst is None:
            return self
        val = self.wrapped(inst)
        setattr(inst, self.wrapped.__name__, val)
        return val
