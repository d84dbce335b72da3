"""
The escape-time kernel: how long an orbit stays bounded
"""
from .viewport import sample_point
import numpy

MAX_ITER = 1000
MAX_BOUND = 1000000


def escape_time(c_real, c_imag, max_iter=MAX_ITER, max_bound=MAX_BOUND):
    """
    Iterate z -> z**2 + c starting from z = c and return the first
    iteration at which |z|**2 reaches `max_bound`, or `max_iter` if
    it never does.
    """
    z_real, z_imag = c_real, c_imag
    n = 0
    while n < max_iter:
        re2 = z_real * z_real
        im2 = z_imag * z_imag
        if re2 + im2 >= max_bound:
            break
        z_imag = 2 * z_real * z_imag + c_imag
        z_real = re2 - im2 + c_real
        n += 1
    return n


def sweep_row(out, viewport, j, increment, max_iter=MAX_ITER, max_bound=MAX_BOUND):
    """
    Fill `out`, the view of row `j`, with the escape time of each column.

    The whole row steps through the orbit at once as float64 arrays,
    in the same order of operations as `escape_time`, so each pixel
    gets the same count. Escaped columns drop out of the working set.
    """
    cols = numpy.arange(len(out))
    c_real, c_imag = sample_point(viewport, cols.astype(numpy.float64), j, increment)
    z_real, z_imag = c_real.copy(), numpy.full(len(cols), c_imag)
    for n in range(max_iter):
        if not len(cols):
            break
        re2 = z_real * z_real
        im2 = z_imag * z_imag
        done = re2 + im2 >= max_bound
        if done.any():
            out[cols[done]] = n
            live = ~done
            cols, c_real = cols[live], c_real[live]
            z_real, z_imag = z_real[live], z_imag[live]
            re2, im2 = re2[live], im2[live]
        z_imag = 2 * z_real * z_imag + c_imag
        z_real = re2 - im2 + c_real
    out[cols] = max_iter
    return out
