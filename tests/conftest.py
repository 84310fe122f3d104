from types import SimpleNamespace

import pytest

from config import NUM_LANDMARKS


def hand(**ys):
    """
    21 landmarks at (0.5, 0.5, 0) with selected y overrides, keyed as
    y<index>=value, plus optional tip_x/tip_y for the index fingertip.
    """
    points = [SimpleNamespace(x=0.5, y=0.5, z=0.0) for _ in range(NUM_LANDMARKS)]
    tip_x = ys.pop("tip_x", None)
    for key, value in ys.items():
        points[int(key[1:])].y = value
    if tip_x is not None:
        points[8].x = tip_x
    return points


@pytest.fixture
def pointing_hand():
    # index tip above its base, thumb level with the wrist
    return hand(y8=0.3, y5=0.5, y4=0.6, y0=0.6)


@pytest.fixture
def fist_hand():
    return hand(y8=0.6, y5=0.5, y12=0.7, y9=0.5)


@pytest.fixture
def open_hand():
    return hand(y8=0.6, y5=0.5, y12=0.3, y9=0.5)
