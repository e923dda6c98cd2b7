import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

# Values of -logfile that mean "the console is the log".
_STREAM_ONLY_TARGETS = {"-", "/dev/stdout", "/dev/stderr"}


def configure_logging(*, log_dir: Path, log_file: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel(logging.INFO)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    if log_file not in _STREAM_ONLY_TARGETS:
        target = Path(log_file) if log_file else log_dir / "builder.log"
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                filename=str(target),
                maxBytes=1_000_000,
                backupCount=3,
                encoding="utf-8",
                delay=True,
            )
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        except OSError:
            root.addHandler(logging.NullHandler())

    if _stderr_usable():
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    logging.raiseExceptions = False


def _stderr_usable() -> bool:
    err = getattr(sys, "stderr", None)
    if err is None:
        return False
    try:
        err.fileno()
    except Exception:
        return False
    return True
