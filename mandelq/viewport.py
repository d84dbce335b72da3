from collections import namedtuple


class Viewport(namedtuple('Viewport', 'min_real min_imag span_real')):
    """
    The rectangle of the complex plane being sampled.

    Only the real-axis span is given; pixels are square so the
    imaginary extent follows from the resolution.
    """
    __slots__ = ()

    def increment(self, width):
        """
        Distance between neighbouring samples, on both axes
        """
        if width <= 0:
            return 0.0
        return self.span_real / float(width)


class Resolution(namedtuple('Resolution', 'width height')):
    __slots__ = ()

    @property
    def size(self):
        return self.width * self.height


def sample_point(viewport, i, j, increment):
    """
    Complex sample for pixel column `i`, row `j` as a (real, imag) pair
    """
    return (viewport.min_real + i * increment,
            viewport.min_imag + j * increment)
