import logging


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Return a named logger with a console handler attached once.

    Output looks like ``[USERS] INFO  Login succeeded for user 3f2a...``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            f"[{name.upper()}] %(levelname)-5s %(message)s"
        ))
        logger.addHandler(handler)

    return logger
