"""
Grayscale curve from iteration count to a 16 bit sample.

t = 1 - idx / max_iter, value = round(65535 * t**7). Points that never
escape (idx == max_iter) are black, points that escape at once are
full white. The steep power keeps most of the plane dark so the detail
along the boundary stands out.
"""
import numpy

MAX_SAMPLE = 65535
EXPONENT = 7


def intensity(idx, max_iter):
    if max_iter <= 0:
        return 0
    t = 1.0 - float(idx) / max_iter
    return int(round(MAX_SAMPLE * t ** EXPONENT))


def intensity_table(max_iter):
    """
    Lookup table of `intensity` for every count in [0, max_iter]
    """
    if max_iter <= 0:
        return numpy.zeros(1, dtype=numpy.uint16)
    idx = numpy.arange(max_iter + 1, dtype=numpy.float64)
    t = 1.0 - idx / max_iter
    return numpy.rint(MAX_SAMPLE * t ** EXPONENT).astype(numpy.uint16)
