"""
Configuration du logging applicatif (appelée une fois au démarrage).
"""

import logging

_NOISY_LOGGERS = ("uvicorn.access", "httpx", "multipart")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
