# path: scripts/thin_arrows_demo.py
import math
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from plot_arrows.services.logging_setup import setup_logging  # noqa: E402
from plot_arrows.domain.arrows import ThinArrow  # noqa: E402
from plot_arrows.view.renderer_arrows import draw_series  # noqa: E402

logger = setup_logging()


def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)


sys.excepthook = _excepthook

TAU = 2.0 * math.pi


def main(out_path: str = "example.png"):
    # 256 x 256 px
    fig = plt.figure(figsize=(2.56, 2.56), dpi=100, facecolor="white")
    ax = fig.add_axes((0.12, 0.12, 0.84, 0.84))
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.0)
    ax.tick_params(labelsize=6)
    ax.grid(True, alpha=0.3)

    x_count = 16
    y_count = 16
    arrow_size = 0.05

    arrows = []
    for xi in range(x_count + 1):
        for yi in range(y_count + 1):
            x = xi / x_count
            y = yi / y_count
            dx = arrow_size * math.cos(y * TAU)
            dy = arrow_size * math.cos(x * TAU)
            arrows.append(ThinArrow.new((x, y), (x + dx, y + dy), "red"))

    n = draw_series(ax, arrows)
    fig.savefig(out_path, dpi=fig.dpi)
    plt.close(fig)
    logger.info("%d flechas dibujadas -> %s", n, out_path)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "example.png")
