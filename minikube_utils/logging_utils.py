import logging
import os

import colorama

from minikube_utils.base import constants


class ColouredFormatter(logging.Formatter):
    STYLES = {
        "WARNING": colorama.Fore.YELLOW,
        "INFO": colorama.Fore.BLUE,
        "DEBUG": colorama.Fore.GREEN,
        "CRITICAL": colorama.Fore.RED + colorama.Style.BRIGHT,
        "ERROR": colorama.Fore.RED,
    }

    def __init__(self, *, fmt):
        logging.Formatter.__init__(self, fmt=fmt)

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        msg = super().format(record)
        try:
            return f"{self.STYLES[record.levelname]}{msg}{colorama.Style.RESET_ALL}"
        except KeyError:
            return msg


def init_logging(verbose: bool = False) -> logging.Logger:
    """Set up the minikube_utils logger to write coloured output to stderr.

    The level is DEBUG if ``verbose`` is set, otherwise it is read from the
    environment variable MINIKUBE_UTILS_LOG_LEVEL (default: WARNING, as messages for
    the user are printed separately).
    """
    log_handler = logging.StreamHandler()
    log_handler.setFormatter(
        ColouredFormatter(fmt="[%(asctime)s] [%(name)s | %(levelname)s] %(message)s")
    )

    logger = logging.getLogger("minikube_utils")
    logger.addHandler(log_handler)
    if verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(os.environ.get(constants.LOG_LEVEL_ENV_VAR, "WARNING").upper())

    return logger
