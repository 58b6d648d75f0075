import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr so rich table output on stdout stays clean.

    ``--verbose`` drops the root level to DEBUG, which surfaces roster loading
    and per-player averaging failures.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
