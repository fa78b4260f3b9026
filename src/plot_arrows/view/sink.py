from __future__ import annotations

from typing import List, Protocol, Sequence

from matplotlib.lines import Line2D
from matplotlib.patches import Polygon
from matplotlib.transforms import IdentityTransform

from plot_arrows.domain.geometry import PixelPoint
from plot_arrows.view.style import ShapeStyle


class DrawingSink(Protocol):
    """
    Contrato mínimo del backend de dibujo.
    Cualquier error se propaga como excepción; el núcleo no lo atrapa.
    """

    def draw_line(self, p1: PixelPoint, p2: PixelPoint, style: ShapeStyle) -> None:
        ...

    def fill_polygon(self, points: Sequence[PixelPoint], style: ShapeStyle) -> None:
        ...


class MatplotlibSink:
    """
    Dibuja primitivas sobre un Axes de matplotlib en coordenadas de display (px).

    IMPORTANTE: los px sólo son válidos con límites/tamaño de figura definitivos
    (llamar después de set_xlim/set_ylim/set_aspect).
    """

    def __init__(self, ax, *, clip: bool = True):
        if ax.figure is None:
            raise RuntimeError("El Axes no tiene figura asociada: no se puede dibujar.")
        self.ax = ax
        self.clip = clip
        self.artists: List[object] = []

    def draw_line(self, p1: PixelPoint, p2: PixelPoint, style: ShapeStyle) -> None:
        line = Line2D(
            [float(p1[0]), float(p2[0])],
            [float(p1[1]), float(p2[1])],
            color=style.color,
            lw=style.stroke_width,
            solid_capstyle="round",
            transform=IdentityTransform(),
            zorder=style.zorder,
            clip_on=self.clip,
        )
        if self.clip:
            line.set_clip_path(self.ax.patch)
        self.ax.add_artist(line)  # add_artist: no toca dataLim
        self.artists.append(line)

    def fill_polygon(self, points: Sequence[PixelPoint], style: ShapeStyle) -> None:
        verts = [(float(x), float(y)) for (x, y) in points]
        if len(verts) < 3:
            raise ValueError(f"Polígono inválido: se requieren >= 3 vértices (hay {len(verts)}).")

        poly = Polygon(
            verts,
            closed=True,
            facecolor=style.color,
            edgecolor=style.color,
            lw=style.stroke_width,
            transform=IdentityTransform(),
            zorder=style.zorder,
            clip_on=self.clip,
        )
        if self.clip:
            poly.set_clip_path(self.ax.patch)
        self.ax.add_artist(poly)
        self.artists.append(poly)
