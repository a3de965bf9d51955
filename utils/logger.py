"""
Logging setup for the fuzzy decision demo.

Every named logger in LOGGER_NAMES writes to its own file under the log
directory; "main" and "decision" also echo to the console. Each record is
stamped with the index of the input sample being evaluated (see
set_sample_index), so a sweep can be followed across the per-logger files.
"""

import glob
import logging
import os
from contextvars import ContextVar
from typing import List

_SAMPLE_I = ContextVar("sample_i", default=-1)

LOGGER_NAMES = [
    "main",
    "config",
    "decision",
    "variable",
    "shapes",
    "utility",
]
CONSOLE_LOGGERS = ("main", "decision")


def set_sample_index(i: int) -> None:
    _SAMPLE_I.set(int(i))


class SampleIndexFilter(logging.Filter):
    def filter(self, record):
        # ensure every record has .i
        record.i = _SAMPLE_I.get()
        return True


def remove_rotated_logs(log_dir: str) -> List[str]:
    """
    Deletes stale rotated files (``*.log.N``) from the log directory.

    Returns:
        List[str]: Paths that could not be removed.
    """
    failed = []
    for path in glob.glob(os.path.join(log_dir, "*.log.*")):
        try:
            os.remove(path)
        except OSError:
            failed.append(path)
    return failed


def setup_logging(
    log_dir: str = "logs",
    overwrite: bool = True,
    log_level: int = logging.DEBUG,
    console_level: int = logging.INFO,
    cleanup_rotated: bool = True,
) -> None:
    """
    Configures the named loggers.

    Args:
        log_dir (str): Directory for the ``<name>.log`` files.
        overwrite (bool): Truncate existing log files; append when False.
        log_level (int): Level of the loggers and their file handlers.
        console_level (int): Level of the console handler.
        cleanup_rotated (bool): Delete stale ``*.log.N`` files first.
    """
    os.makedirs(log_dir, exist_ok=True)
    stale = remove_rotated_logs(log_dir) if cleanup_rotated else []

    fmt = logging.Formatter("%(i)06d | %(levelname)s | %(name)s | %(message)s")

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    console.setLevel(console_level)
    console.addFilter(SampleIndexFilter())

    mode = "w" if overwrite else "a"
    for name in LOGGER_NAMES:
        log = logging.getLogger(name)
        log.setLevel(log_level)
        log.propagate = False
        for h in list(log.handlers):
            log.removeHandler(h)
            h.close()

        fh = logging.FileHandler(os.path.join(log_dir, f"{name}.log"), mode=mode, encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(log_level)
        fh.addFilter(SampleIndexFilter())
        log.addHandler(fh)
        if name in CONSOLE_LOGGERS:
            log.addHandler(console)

    main_log = logging.getLogger("main")
    main_log.info("Logging system initialized.")
    for path in stale:
        main_log.warning("Could not remove rotated log file '%s'.", path)
