from ..viewport import Resolution
from ..viewport import Viewport

# the full set, as the default render frames it
FULL = Viewport(-2.5, -1.0, 3.5)


def small(width=12, height=7):
    return Resolution(width, height)
