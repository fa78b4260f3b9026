# path: tests/test_logging_setup.py
import logging
import os
import tempfile

from plot_arrows.services.logging_setup import setup_logging


def test_setup_logging_creates_file_once():
    logger = logging.getLogger("plot_arrows")
    saved = list(logger.handlers)
    for h in saved:
        logger.removeHandler(h)
    try:
        with tempfile.TemporaryDirectory() as td:
            lg = setup_logging(log_dir=td, log_name="test.log")
            n = len(lg.handlers)
            assert n == 2

            again = setup_logging(log_dir=td, log_name="test.log")
            assert again is lg
            assert len(again.handlers) == n

            for h in lg.handlers:
                h.flush()
            out = os.path.join(td, "test.log")
            assert os.path.exists(out)
            assert os.path.getsize(out) > 0

            for h in list(lg.handlers):
                lg.removeHandler(h)
                h.close()
    finally:
        for h in saved:
            logger.addHandler(h)
