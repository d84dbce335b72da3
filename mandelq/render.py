from .kernel import MAX_BOUND
from .kernel import MAX_ITER
from .kernel import sweep_row
from .pool import WorkerPool
from .ppm import write_ppm
from .service import Service
from .service import Setting
from .utils import MandelqError
from .viewport import Resolution
from .viewport import Viewport
import numpy
import time


class AllocationError(MandelqError):
    """
    No room for the iteration buffer
    """


def allocate(resolution):
    """
    A zeroed, row-major buffer of 16 bit iteration counts
    """
    try:
        return numpy.zeros((resolution.height, resolution.width), dtype=numpy.uint16)
    except (MemoryError, ValueError) as e:
        raise AllocationError("Unable to allocate %dx%d buffer: %s"
                              % (resolution.width, resolution.height, e)) from e


@Setting.initialize_all
class Renderer(Service):
    """
    Renders one view of the Mandelbrot set with a pool of workers.

    Each worker claims whole rows from a shared scheduler until none
    are left, writing straight into its own rows of the buffer.
    """
    min_real = Setting(default=-2.5, ctor=float,
                       help="Real part of the lower left corner")

    min_imag = Setting(default=-1.0, ctor=float,
                       help="Imaginary part of the lower left corner")

    span_real = Setting(default=3.5, ctor=float,
                        help="Width of the view along the real axis")

    width = Setting(default=960, ctor=int, help="Image width in pixels")

    height = Setting(default=540, ctor=int, help="Image height in pixels")

    max_iter = Setting(default=MAX_ITER, ctor=int,
                       help="Iteration cap, points that reach it count as inside")

    max_bound = Setting(default=MAX_BOUND, ctor=float,
                        help="Escape bound on the squared modulus")

    workers = Setting(default=64, ctor=int, # tune this
                      help="How many workers claim rows at once")

    async_handler = Setting(default='mandelq.threads.AsyncManager',
                            help="dotted name of async manager")

    output = Setting(default='mb.ppm', help="Where to write the image")

    def __init__(self, config=None):
        super(Renderer, self).__init__(config)
        self.pool = None

    @property
    def viewport(self):
        return Viewport(self.min_real, self.min_imag, self.span_real)

    @property
    def resolution(self):
        return Resolution(self.width, self.height)

    def do_start(self):
        self.pool = WorkerPool(self.workers, self.async_manager)

    def do_stop(self):
        self.pool.stop()

    def render(self):
        """
        Fill a fresh iteration buffer; returns it with the worker reports
        """
        if not self.ready:
            self.start()

        buffer = allocate(self.resolution)
        viewport = self.viewport
        increment = viewport.increment(self.width)
        max_iter, max_bound = self.max_iter, self.max_bound

        def task(row):
            sweep_row(buffer[row], viewport, row, increment, max_iter, max_bound)

        self.log.info("Rendering %dx%d at %r with %d workers",
                      self.width, self.height, viewport, self.workers)
        start = time.time()
        reports = self.pool.run(self.pool.scheduler(self.height), task)
        self.log.info("Rendered %d rows in %.3fs", self.height, time.time() - start)
        return buffer, reports

    def write(self, buffer, dest=None):
        if dest is None:
            dest = self.output
        return write_ppm(dest, self.width, self.height, buffer, self.max_iter)


def settings_for(viewport, resolution, max_iter, max_bound):
    config = dict(viewport._asdict())
    config.update(resolution._asdict())
    config.update(max_iter=max_iter, max_bound=max_bound)
    return config


def render(viewport, resolution, max_iter=MAX_ITER, workers=1, max_bound=MAX_BOUND,
           async_handler=None):
    """
    Compute the iteration buffer for `viewport` at `resolution` using
    `workers` concurrent workers
    """
    config = settings_for(viewport, resolution, max_iter, max_bound)
    config['workers'] = workers
    if async_handler is not None:
        config['async_handler'] = async_handler
    with Renderer(config) as renderer:
        buffer, reports = renderer.render()
    return buffer


def render_sequential(viewport, resolution, max_iter=MAX_ITER, max_bound=MAX_BOUND):
    """
    Row by row in the calling thread, no scheduler involved
    """
    buffer = allocate(resolution)
    increment = viewport.increment(resolution.width)
    for row in range(resolution.height):
        sweep_row(buffer[row], viewport, row, increment, max_iter, max_bound)
    return buffer
