from __future__ import annotations

import logging
from typing import Iterable, Optional

from plot_arrows.domain.arrows import HeadKind, ArrowShape
from plot_arrows.domain.geometry import PixelPoint, ResolvedHeadGeometry
from plot_arrows.domain.sizes import PanelDim, resolve_size
from plot_arrows.engine.head_geometry import solve_head_geometry
from plot_arrows.view.sink import DrawingSink
from plot_arrows.view.style import ShapeStyle

logger = logging.getLogger("plot_arrows")


def emit_head(
    sink: DrawingSink,
    geom: ResolvedHeadGeometry,
    kind: HeadKind,
    style: ShapeStyle,
) -> None:
    """
    Envía las primitivas al sink, en orden fijo: fuste primero, luego cabeza.
    Si el sink falla, la excepción se propaga tal cual (puede quedar dibujo parcial).
    """
    if not isinstance(kind, HeadKind):
        raise ValueError(f"Tipo de cabeza no soportado: {kind!r}")

    sink.draw_line(geom.tail, geom.tip, style)

    if kind is HeadKind.OPEN:
        sink.draw_line(geom.tip, geom.left_barb, style)
        sink.draw_line(geom.tip, geom.right_barb, style)
    else:
        sink.fill_polygon(list(geom.head_ring()), style)


def draw_arrow(
    arrow: ArrowShape,
    positions: Iterable[PixelPoint],
    sink: DrawingSink,
    parent_dim: PanelDim,
) -> Optional[ResolvedHeadGeometry]:
    """
    Dibuja una flecha ya resuelta a pixeles.

    positions: iterable con (tail, tip) en px, en ese orden (lo arma el pipeline externo).
    parent_dim: (ancho, alto) del panel en px, para resolver tamaños relativos.

    Devuelve la geometría dibujada, o None si no se dibujó nada.
    """
    it = iter(positions)
    tail = next(it, None)
    tip = next(it, None)
    if tail is None or tip is None:
        logger.warning("Flecha sin 2 puntos resueltos (tail=%s, tip=%s): no se dibuja.", tail, tip)
        return None

    head_px = float(resolve_size(arrow.head_length, parent_dim))
    width_px = float(resolve_size(arrow.head_width, parent_dim))

    geom = solve_head_geometry(tail, tip, head_px, width_px)
    if geom is None:
        logger.debug("Flecha degenerada (tail == tip = %s): no se dibuja.", tail)
        return None

    emit_head(sink, geom, arrow.kind, arrow.style)
    return geom
