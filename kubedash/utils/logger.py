import logging
import os
from typing import Optional

BASE_LOGGER_NAME = "kubedash"


def init_logger(output_dir: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Configure the 'kubedash' parent logger.

    Every call replaces the handlers installed by the previous one, so repeated
    command invocations in one process write to their own streams.
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    parent = logging.getLogger(BASE_LOGGER_NAME)

    # kubernetes/urllib3 are chatty at INFO, keep the root quiet
    logging.getLogger().setLevel(logging.CRITICAL)

    for handler in list(parent.handlers):
        parent.removeHandler(handler)
        handler.close()

    # Handlers live on the parent, module loggers propagate to it
    parent.setLevel(logging.DEBUG)
    parent.propagate = False

    console = logging.StreamHandler()
    console.setLevel(log_level)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    parent.addHandler(console)

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        file_path = os.path.join(output_dir, "run.log")
        fh = logging.FileHandler(file_path)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        parent.addHandler(fh)

    return parent


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger under the 'kubedash' namespace so it inherits parent's handlers.
    Example: get_logger("resource.base") -> logger name "kubedash.resource.base"
    """
    if name and not name.startswith(BASE_LOGGER_NAME):
        fullname = f"{BASE_LOGGER_NAME}.{name}"
    else:
        fullname = name or BASE_LOGGER_NAME
    return logging.getLogger(fullname)
