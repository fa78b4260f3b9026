from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

import numpy as np

from plot_arrows.domain.arrows import ArrowShape
from plot_arrows.domain.geometry import LogicalPoint, PixelPoint
from plot_arrows.domain.sizes import PanelDim
from plot_arrows.engine.emitter import draw_arrow
from plot_arrows.view.sink import MatplotlibSink

logger = logging.getLogger("plot_arrows")


# -------------------------
# Resolución (datos -> px)
# -------------------------
def panel_dim_px(ax) -> PanelDim:
    """(ancho, alto) en px del área de dibujo del Axes."""
    bb = ax.get_window_extent()
    return int(bb.width), int(bb.height)


def resolve_points(ax, points: Sequence[LogicalPoint]) -> List[PixelPoint]:
    """
    Datos -> pixeles de display, vía ax.transData.
    IMPORTANTE: llamar SOLO después de set_xlim/set_ylim/set_aspect.
    """
    if len(points) == 0:
        return []
    xy = np.asarray(points, dtype=float).reshape(-1, 2)
    pix = np.rint(ax.transData.transform(xy)).astype(int)
    return [(int(x), int(y)) for x, y in pix]


# -------------------------
# Render principal
# -------------------------
def draw_series(ax, arrows: Iterable[ArrowShape], *, clip: bool = True) -> int:
    """
    Dibuja una serie de flechas sobre el Axes (cada una independiente).
    Devuelve cuántas flechas produjeron geometría (las degeneradas no cuentan).

    Los límites del Axes se congelan antes de resolver: el autoscale posterior
    invalidaría los px ya calculados.
    """
    ax.set_xlim(ax.get_xlim())
    ax.set_ylim(ax.get_ylim())

    sink = MatplotlibSink(ax, clip=clip)
    dim = panel_dim_px(ax)

    drawn = 0
    total = 0
    for arrow in arrows:
        total += 1
        pts = resolve_points(ax, list(arrow.point_iter()))
        if draw_arrow(arrow, pts, sink, dim) is not None:
            drawn += 1

    logger.debug("draw_series: %d/%d flechas dibujadas (panel=%sx%s px).", drawn, total, dim[0], dim[1])
    return drawn
