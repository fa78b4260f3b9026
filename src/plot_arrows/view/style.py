from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

Color = Union[str, Tuple[float, float, float], Tuple[float, float, float, float]]


@dataclass(frozen=True)
class ShapeStyle:
    """
    Estilo de trazo/relleno. El núcleo no lo interpreta: se pasa tal cual al sink.
    """
    color: Color = "black"
    stroke_width: float = 1.0
    zorder: float = 10.0


@dataclass(frozen=True)
class ArrowDefaults:
    # Tamaños por defecto de la cabeza (pixeles)
    head_px: int = 5
    width_px: int = 5


DEFAULTS = ArrowDefaults()


def as_style(style: Union[ShapeStyle, Color]) -> ShapeStyle:
    """Acepta un ShapeStyle o directamente un color."""
    if isinstance(style, ShapeStyle):
        return style
    return ShapeStyle(color=style)
