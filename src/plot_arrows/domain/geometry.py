from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

# Coordenadas de dispositivo (enteras)
PixelPoint = Tuple[int, int]

# Coordenadas del sistema del usuario (datos, sin resolver)
LogicalPoint = Tuple[Any, Any]


@dataclass(frozen=True)
class ResolvedHeadGeometry:
    """
    Geometría resuelta de una flecha, en pixeles.
    Se calcula en cada dibujo; no se guarda.
    """
    tail: PixelPoint
    tip: PixelPoint
    left_barb: PixelPoint
    right_barb: PixelPoint

    def head_ring(self) -> Tuple[PixelPoint, PixelPoint, PixelPoint, PixelPoint]:
        """Anillo cerrado de la cabeza: tip -> left -> right -> tip."""
        return (self.tip, self.left_barb, self.right_barb, self.tip)
