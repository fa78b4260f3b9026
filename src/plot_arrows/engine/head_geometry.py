from __future__ import annotations

import math
from typing import Optional

from plot_arrows.domain.geometry import PixelPoint, ResolvedHeadGeometry


def _to_px(v: float) -> int:
    """Redondeo al pixel más cercano (mitades lejos de cero)."""
    return int(math.floor(v + 0.5)) if v >= 0 else -int(math.floor(-v + 0.5))


def solve_head_geometry(
    tail: PixelPoint,
    tip: PixelPoint,
    head_length_px: float,
    head_width_px: float,
) -> Optional[ResolvedHeadGeometry]:
    """
    Calcula los extremos de la cabeza (barbs) a partir del vector del fuste.

    - tail == tip: flecha sin longitud => None (no se dibuja nada, no es error).
    - head y width se recortan a la longitud del fuste: la cabeza nunca pasa del tail.
    - Todo en float; se redondea a pixel UNA sola vez, al final.
    """
    tx, ty = int(tail[0]), int(tail[1])
    px, py = int(tip[0]), int(tip[1])
    if (tx, ty) == (px, py):
        return None

    dx = float(px - tx)
    dy = float(py - ty)
    d = math.sqrt(dx * dx + dy * dy)

    head = min(float(head_length_px), d)
    width = min(float(head_width_px), d)
    half_width = width * 0.5

    # Offset perpendicular: (-head*u) ± half_width*n, con u = (dx, dy)/d y n = (dy, -dx)/d
    left = (
        _to_px(px + (-head * dx + half_width * dy) / d),
        _to_px(py + (-head * dy - half_width * dx) / d),
    )
    right = (
        _to_px(px + (-head * dx - half_width * dy) / d),
        _to_px(py + (-head * dy + half_width * dx) / d),
    )

    return ResolvedHeadGeometry(
        tail=(tx, ty),
        tip=(px, py),
        left_barb=left,
        right_barb=right,
    )
