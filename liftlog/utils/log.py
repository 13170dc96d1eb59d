import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

noisy_loggers = [
    "urllib3",
    "requests",
]

for name in noisy_loggers:
    logging.getLogger(name).setLevel(logging.INFO)

logger = logging.getLogger("liftlog")
logger.setLevel(LOG_LEVEL)
logger.propagate = True

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)

logger.debug(f"Logger initialised level={LOG_LEVEL}")
