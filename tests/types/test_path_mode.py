import math

import pytest

from schedgraph.types.base import NO_PREDECESSOR, PathMode


def test_unreached_sentinels():
    assert PathMode.MINIMIZE.unreached == math.inf
    assert PathMode.MAXIMIZE.unreached == -math.inf


def test_improves_is_strict():
    assert PathMode.MINIMIZE.improves(1.0, 2.0)
    assert not PathMode.MINIMIZE.improves(2.0, 2.0)
    assert PathMode.MAXIMIZE.improves(3.0, 2.0)
    assert not PathMode.MAXIMIZE.improves(2.0, 2.0)
    assert PathMode.MINIMIZE.improves(5.0, PathMode.MINIMIZE.unreached)
    assert PathMode.MAXIMIZE.improves(-5.0, PathMode.MAXIMIZE.unreached)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("shortest", PathMode.MINIMIZE),
        ("LONGEST", PathMode.MAXIMIZE),
        ("minimize", PathMode.MINIMIZE),
        (" Maximize ", PathMode.MAXIMIZE),
    ],
)
def test_from_string(text, expected):
    assert PathMode.from_string(text) is expected


def test_from_string_invalid():
    with pytest.raises(ValueError, match="Invalid path mode 'fastest'"):
        PathMode.from_string("fastest")


def test_no_predecessor_sentinel():
    assert NO_PREDECESSOR == -1
