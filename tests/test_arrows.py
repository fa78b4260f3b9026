# path: tests/test_arrows.py
import dataclasses

import pytest

from plot_arrows.domain.arrows import HeadKind, ThinArrow, TriangleArrow
from plot_arrows.domain.sizes import RelativeToShortestSide
from plot_arrows.view.style import ShapeStyle


def test_new_uses_default_head_sizes():
    a = ThinArrow.new((0.0, 0.0), (1.0, 1.0), "red")
    assert a.head_length == 5
    assert a.head_width == 5
    assert a.style == ShapeStyle(color="red")
    assert a.kind is HeadKind.OPEN
    assert TriangleArrow.new((0, 0), (1, 1), "red").kind is HeadKind.FILLED


def test_points_in_tail_tip_order():
    a = TriangleArrow.new((1, 2), (3, 4), ShapeStyle())
    assert list(a.point_iter()) == [(1, 2), (3, 4)]
    assert a.tail == (1, 2)
    assert a.tip == (3, 4)


def test_builders_return_new_value_and_keep_the_rest():
    style = ShapeStyle(color="blue", stroke_width=3.0)
    a = ThinArrow.new_detail((0, 0), (10, 0), 5, 5, style)
    b = a.head(12)
    c = b.width(RelativeToShortestSide(0.1))

    assert a.head_length == 5 and a.head_width == 5
    assert b.head_length == 12 and b.head_width == 5
    assert c.head_length == 12 and c.head_width == RelativeToShortestSide(0.1)

    for x in (b, c):
        assert type(x) is ThinArrow
        assert x.points == a.points
        assert x.style is style


def test_descriptor_is_immutable():
    a = ThinArrow.new((0, 0), (1, 0), "k")
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.head_length = 7


def test_degenerate_descriptor_is_allowed():
    a = TriangleArrow.new((5, 5), (5, 5), "k")
    assert a.tail == a.tip
