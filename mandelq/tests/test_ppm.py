from ..ppm import ImageWriteError
from ..ppm import encode_pixels
from ..ppm import ppm_header
from ..ppm import render_chunks
from ..ppm import write_ppm
from mock import Mock
from mock import patch
import io
import numpy
import pytest
import struct


def be16(value):
    return struct.pack('>H', value)


def test_header():
    assert ppm_header(2, 3) == b"P6\n2 3\n65535\n"
    assert ppm_header(3840, 2160) == b"P6\n3840 2160\n65535\n"


def test_two_by_two():
    buffer = numpy.array([[0, 10], [5, 10]], dtype=numpy.uint16)
    out = io.BytesIO()
    write_ppm(out, 2, 2, buffer, 10)

    # escaped at once, in the set, halfway (t=0.5 -> 512), in the set
    pixels = [65535, 0, 512, 0]
    body = b''.join(be16(value) * 3 for value in pixels)
    assert len(body) == 24
    assert out.getvalue() == b"P6\n2 2\n65535\n" + body


def test_one_pixel():
    out = io.BytesIO()
    write_ppm(out, 1, 1, numpy.array([[3]], dtype=numpy.uint16), 1000)
    data = out.getvalue()
    header = b"P6\n1 1\n65535\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 6
    assert data[len(header):] == data[len(header):len(header) + 2] * 3


def test_empty_image():
    out = io.BytesIO()
    write_ppm(out, 0, 0, numpy.zeros((0, 0), dtype=numpy.uint16), 1000)
    assert out.getvalue() == b"P6\n0 0\n65535\n"


def test_samples_independent_of_host_order():
    buffer = numpy.array([[1]], dtype=numpy.uint16)
    data = encode_pixels(buffer, 2)
    # idx 1 of 2: t = 0.5 -> 512 -> 0x02 0x00
    assert data == b'\x02\x00' * 3
    assert data == encode_pixels(buffer.byteswap().view(buffer.dtype.newbyteorder()), 2)


def test_counts_above_cap_clip():
    data = encode_pixels(numpy.array([[12]], dtype=numpy.uint16), 10)
    assert data == b'\x00\x00' * 3


def test_write_to_path(tmp_path):
    dest = tmp_path / 'mb.ppm'
    buffer = numpy.array([[0, 4]], dtype=numpy.uint16)
    write_ppm(str(dest), 2, 1, buffer, 4)
    data = dest.read_bytes()
    assert data == b"P6\n2 1\n65535\n" + b'\xff\xff' * 3 + b'\x00\x00' * 3


def test_unopenable_path(tmp_path):
    dest = tmp_path / 'missing' / 'mb.ppm'
    with pytest.raises(ImageWriteError):
        write_ppm(str(dest), 1, 1, numpy.zeros((1, 1), dtype=numpy.uint16), 10)


def test_stream_failure():
    stream = Mock()
    stream.write.side_effect = OSError("disk full")
    with pytest.raises(ImageWriteError) as info:
        write_ppm(stream, 1, 1, numpy.zeros((1, 1), dtype=numpy.uint16), 10)
    assert isinstance(info.value.__cause__, OSError)


def test_partial_file_removed(tmp_path):
    dest = tmp_path / 'mb.ppm'

    def half_write(stream, *args):
        stream.write(b"P6\n")
        raise OSError("disk full")

    with patch('mandelq.ppm.write_stream', side_effect=half_write):
        with pytest.raises(ImageWriteError):
            write_ppm(str(dest), 1, 1, numpy.zeros((1, 1), dtype=numpy.uint16), 10)
    assert not dest.exists()


def test_chunks_per_row():
    buffer = numpy.array([[0, 0, 0], [10, 10, 10]], dtype=numpy.uint16)
    chunks = list(render_chunks(3, 2, buffer, 10))
    assert chunks == [b"P6\n3 2\n65535\n", b'\xff\xff' * 9, b'\x00\x00' * 9]


def test_closed_stream():
    stream = io.BytesIO()
    stream.close()
    with pytest.raises(ImageWriteError) as info:
        write_ppm(stream, 1, 1, numpy.zeros((1, 1), dtype=numpy.uint16), 10)
    assert isinstance(info.value.__cause__, ValueError)
