"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

APP_NAME = "Lazy Inventory"
DATE_FORMAT = "%d/%m/%Y"
DATE_FORMAT_HINT = "dd/mm/aaaa"
CURRENCY_SYMBOL = "$"
DEFAULT_EXPIRING_DAYS = 7
# El menu escribe en la misma consola; INFO solo para depurar.
LOG_LEVEL = logging.WARNING

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
