import logging

_LOGGER_NAME = "pattern_matching"


def get_logger(component=None):
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    logger = logging.getLogger(name)
    root = logging.getLogger(_LOGGER_NAME)
    # un seul handler, sur le logger racine du projet
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logger
