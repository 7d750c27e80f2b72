import logging
from typing import Optional

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def prepare_logger(
    logger_name: str,
    level: str = "INFO",
    log_file_name: Optional[str] = None,
) -> logging.Logger:
    logger = logging.getLogger(logger_name)
    formatter = logging.Formatter(fmt=_FORMAT)

    # Calling twice for the same name must not duplicate the output
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if log_file_name:
            file_handler = logging.FileHandler(log_file_name, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
