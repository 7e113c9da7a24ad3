import logging
import sys


logger = logging.getLogger("app")


def setup_logger(level: str = "INFO"):
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", "%Y-%m-%d %H:%M:%S")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
