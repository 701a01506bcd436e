import pytest

from colortransition import ColorTransition


@pytest.fixture
def two_point():
    """Red at 50, blue at 200."""
    return ColorTransition.from_points([(50, 255, 0, 0), (200, 0, 0, 255)])


@pytest.fixture
def terrain():
    return ColorTransition.from_points([
        (0, 0, 0, 128),
        (90, 30, 110, 200),
        (128, 240, 220, 130),
        (170, 40, 160, 40),
        (220, 120, 110, 100),
        (255, 255, 255, 255),
    ])
