# path: tests/test_sizes.py
import pytest

from plot_arrows.domain.sizes import (
    Pixels,
    RelativeToHeight,
    RelativeToLongestSide,
    RelativeToShortestSide,
    RelativeToWidth,
    resolve_size,
)

DIM = (640, 480)


@pytest.mark.parametrize(
    "measure, expected",
    [
        (5, 5),
        (7.9, 7),
        (Pixels(12), 12),
        (RelativeToWidth(0.25), 160),
        (RelativeToHeight(0.25), 120),
        (RelativeToShortestSide(0.5), 240),
        (RelativeToLongestSide(0.5), 320),
    ],
)
def test_resolve_size(measure, expected):
    assert resolve_size(measure, DIM) == expected


def test_relative_size_on_empty_panel_is_zero():
    assert resolve_size(RelativeToShortestSide(0.3), (0, 100)) == 0


def test_unsupported_measure():
    with pytest.raises(TypeError):
        resolve_size("5px", DIM)
    with pytest.raises(TypeError):
        resolve_size(True, DIM)


def test_negative_panel_dim():
    with pytest.raises(ValueError):
        resolve_size(5, (-1, 10))
