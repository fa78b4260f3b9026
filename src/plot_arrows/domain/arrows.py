from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Iterator, Tuple, TypeVar, Union

from plot_arrows.domain.geometry import LogicalPoint
from plot_arrows.domain.sizes import SizeMeasure
from plot_arrows.view.style import DEFAULTS, Color, ShapeStyle, as_style


class HeadKind(Enum):
    OPEN = "open"        # dos trazos divergentes
    FILLED = "filled"    # triángulo relleno


A = TypeVar("A", bound="ArrowShape")


@dataclass(frozen=True)
class ArrowShape:
    """
    Descriptor inmutable de una flecha.

    points: (tail, tip) en coordenadas del usuario, SIN resolver.
    El orden define la dirección: la cabeza se dibuja en tip.
    """
    points: Tuple[LogicalPoint, LogicalPoint]
    head_length: SizeMeasure
    head_width: SizeMeasure
    style: ShapeStyle

    kind: ClassVar[HeadKind]

    @classmethod
    def new(cls: type[A], tail: LogicalPoint, tip: LogicalPoint, style: Union[ShapeStyle, Color]) -> A:
        return cls(
            points=(tail, tip),
            head_length=DEFAULTS.head_px,
            head_width=DEFAULTS.width_px,
            style=as_style(style),
        )

    @classmethod
    def new_detail(
        cls: type[A],
        tail: LogicalPoint,
        tip: LogicalPoint,
        head_length: SizeMeasure,
        head_width: SizeMeasure,
        style: Union[ShapeStyle, Color],
    ) -> A:
        return cls(
            points=(tail, tip),
            head_length=head_length,
            head_width=head_width,
            style=as_style(style),
        )

    @property
    def tail(self) -> LogicalPoint:
        return self.points[0]

    @property
    def tip(self) -> LogicalPoint:
        return self.points[1]

    def head(self: A, head_length: SizeMeasure) -> A:
        return replace(self, head_length=head_length)

    def width(self: A, head_width: SizeMeasure) -> A:
        return replace(self, head_width=head_width)

    def point_iter(self) -> Iterator[LogicalPoint]:
        """Única geometría dibujable: tail y tip, en ese orden."""
        return iter(self.points)


@dataclass(frozen=True)
class ThinArrow(ArrowShape):
    kind: ClassVar[HeadKind] = HeadKind.OPEN


@dataclass(frozen=True)
class TriangleArrow(ArrowShape):
    kind: ClassVar[HeadKind] = HeadKind.FILLED
