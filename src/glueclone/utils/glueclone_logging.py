"""GlueClone logging: the "glueclone" logger, an IMPORTANT level and colored stdout output"""

import os
import sys
import logging
import traceback
from contextlib import contextmanager

# Keep botocore's per-request checksum chatter out of our output
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)

# IMPORTANT sits between INFO and WARNING (workflow created/deleted, clone complete)
IMPORTANT = 25
logging.addLevelName(IMPORTANT, "IMPORTANT")


def _important(self, message, *args, **kwargs):
    if self.isEnabledFor(IMPORTANT):
        kwargs.setdefault("stacklevel", 2)
        self._log(IMPORTANT, message, args, **kwargs)


logging.Logger.important = _important


class ColoredFormatter(logging.Formatter):
    """Wrap each record in an ANSI color picked by its level"""

    LEVEL_COLORS = {
        "DEBUG": "\x1b[38;5;60m",
        "INFO": "\x1b[38;5;69m",
        "IMPORTANT": "\x1b[38;5;113m",
        "WARNING": "\x1b[38;5;190m",
        "ERROR": "\x1b[38;5;208m",
        "CRITICAL": "\x1b[38;5;198m",
    }
    RESET = "\x1b[0m"

    def __init__(self):
        super().__init__("%(asctime)s (%(filename)s:%(lineno)d) %(levelname)s %(message)s", "%Y-%m-%d %H:%M:%S")

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelname, self.RESET)
        return f"{color}{super().format(record)}{self.RESET}"


def logging_setup():
    """Attach a single colored stdout handler to the glueclone logger (safe to call repeatedly)"""
    log = logging.getLogger("glueclone")
    if getattr(log, "_is_setup", False):
        return
    log._is_setup = True
    log.propagate = False

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(ColoredFormatter())
    log.addHandler(handler)

    debug = os.getenv("GLUECLONE_DEBUG", "False").lower() == "true"
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.debug("GLUECLONE_DEBUG is set, logging at DEBUG level")


@contextmanager
def exception_log_forward(call_on_exception=None):
    """Log any exception raised in the block at CRITICAL, then re-raise it or hand it to call_on_exception"""
    log = logging.getLogger("glueclone")
    try:
        yield
    except Exception as e:
        # Drop the frame of the with-block itself, keep the frames below it
        frames = traceback.extract_tb(e.__traceback__)[1:]
        summary = traceback.format_exception_only(type(e), e)[-1]
        log.critical("Exception:\n" + "".join(traceback.format_list(frames)) + summary)
        for handler in log.handlers:
            handler.flush()
        if callable(call_on_exception):
            return call_on_exception(e)
        raise
