import logging
import os
import sys

# -------------------------------
# Backend endpoint
# -------------------------------
API_BASE = os.getenv("API_BASE", "http://localhost:3000").rstrip("/")
RESOURCE_URL = f"{API_BASE}/products"

# Minimum time the loading flag stays up after a read resolves
LOADING_WINDOW_SECONDS = float(os.getenv("LOADING_WINDOW_SECONDS", "3.0"))

# -------------------------------
# User-facing messages
# -------------------------------
READ_ERROR_MESSAGE = "Houve algum erro ao carregar os dados!"
MUTATION_ERROR_MESSAGE = "Houve algum erro ao salvar os dados!"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging() -> logging.Logger:
    """Configure the `catalog` logger once and return it."""
    logger = logging.getLogger("catalog")
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(handler)

    return logger
