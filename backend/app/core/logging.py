import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    # no duplicar handlers con --reload
    if getattr(root, "_itag_configured", False):
        return
    root.setLevel(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s | %(message)s"))
    root.addHandler(handler)
    root._itag_configured = True
