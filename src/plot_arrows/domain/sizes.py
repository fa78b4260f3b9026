from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Pixels:
    """Tamaño absoluto en pixeles (no depende del panel)."""
    value: float


@dataclass(frozen=True)
class RelativeToHeight:
    fraction: float  # fracción del alto del panel


@dataclass(frozen=True)
class RelativeToWidth:
    fraction: float  # fracción del ancho del panel


@dataclass(frozen=True)
class RelativeToShortestSide:
    fraction: float  # fracción de min(ancho, alto)


@dataclass(frozen=True)
class RelativeToLongestSide:
    fraction: float  # fracción de max(ancho, alto)


SizeMeasure = Union[
    Pixels,
    RelativeToHeight,
    RelativeToWidth,
    RelativeToShortestSide,
    RelativeToLongestSide,
    int,
    float,
]

PanelDim = Tuple[int, int]  # (ancho_px, alto_px)


def resolve_size(measure: SizeMeasure, panel_dim: PanelDim) -> int:
    """
    Convierte un SizeMeasure a pixeles usando las dimensiones del panel.

    - int/float se interpretan como pixeles absolutos.
    - El resultado se trunca hacia cero (pixeles enteros).
    """
    w, h = panel_dim
    if w < 0 or h < 0:
        raise ValueError(f"Dimensiones de panel inválidas: {panel_dim}")

    # bool es subclase de int: no es un tamaño válido
    if isinstance(measure, bool):
        raise TypeError(f"Tamaño no soportado: {measure!r}")

    if isinstance(measure, numbers.Real):
        px = float(measure)
    elif isinstance(measure, Pixels):
        px = float(measure.value)
    elif isinstance(measure, RelativeToHeight):
        px = float(measure.fraction) * h
    elif isinstance(measure, RelativeToWidth):
        px = float(measure.fraction) * w
    elif isinstance(measure, RelativeToShortestSide):
        px = float(measure.fraction) * min(w, h)
    elif isinstance(measure, RelativeToLongestSide):
        px = float(measure.fraction) * max(w, h)
    else:
        raise TypeError(f"Tamaño no soportado: {measure!r}")

    return int(px)
