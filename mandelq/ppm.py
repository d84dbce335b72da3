"""
16 bit binary PPM (P6) output.

With a maximum sample value above 255 the format stores every sample
as two bytes, most significant first. The byte order is spelled out
in the dtype so the host's own order never leaks into the file.
"""
from .intensity import intensity_table
from .utils import MandelqError
from path import Path
import logging
import numpy

log = logging.getLogger(__name__)

MAXVAL = 65535
SAMPLE = numpy.dtype('>u2')
CHANNELS = 3


class ImageWriteError(MandelqError):
    """
    The destination could not be opened or written
    """


def ppm_header(width, height):
    return ("P6\n%d %d\n%d\n" % (width, height, MAXVAL)).encode('ascii')


def encode_pixels(buffer, max_iter, table=None):
    """
    Map every iteration count through the intensity curve and lay the
    result out as big-endian RGB samples, row-major
    """
    if table is None:
        table = intensity_table(max_iter)
    values = numpy.take(table, numpy.asarray(buffer, dtype=numpy.intp), mode='clip')
    rgb = numpy.repeat(values.reshape(-1, 1), CHANNELS, axis=1)
    return rgb.astype(SAMPLE).tobytes()


def render_chunks(width, height, buffer, max_iter):
    """
    The header, then the samples one row at a time
    """
    yield ppm_header(width, height)
    table = intensity_table(max_iter)
    for row in buffer:
        yield encode_pixels(row, max_iter, table)


def write_stream(stream, width, height, buffer, max_iter):
    for data in render_chunks(width, height, buffer, max_iter):
        stream.write(data)
    stream.flush()


def write_ppm(dest, width, height, buffer, max_iter):
    """
    Write the image to `dest`, a path or a binary stream.

    Raises `ImageWriteError` if anything goes wrong; a file this
    function created is removed rather than left half written.
    """
    if hasattr(dest, 'write'):
        try:
            write_stream(dest, width, height, buffer, max_iter)
        except (OSError, ValueError) as e:
            raise ImageWriteError("Unable to write image: %s" % e) from e
        return dest

    dest = Path(dest)
    try:
        out = open(dest, 'wb')
    except OSError as e:
        raise ImageWriteError("Unable to open %s: %s" % (dest, e)) from e

    try:
        with out:
            write_stream(out, width, height, buffer, max_iter)
    except (OSError, ValueError) as e:
        log.error("Write to %s failed, removing partial file", dest)
        dest.remove_p()
        raise ImageWriteError("Unable to write %s: %s" % (dest, e)) from e

    log.info("Wrote %dx%d image to %s", width, height, dest)
    return dest
