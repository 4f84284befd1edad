"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import Protocol, TypeVar

from servidor.domain.models import Producto
from servidor.services.inventory_store import InventoryStore
from shared.errors import ServiceError
from shared.protocol import ProductDraft, ProductUpdate

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class InventoryGateway(Protocol):
    """Interfaz de acceso del cliente al almacen de inventario."""

    def add_product(self, draft: ProductDraft) -> None:
        """Solicita registrar un producto nuevo."""

    def update_product(self, codigo_barras: str, changes: ProductUpdate) -> Producto | None:
        """Solicita actualizar el primer producto con el codigo indicado."""

    def remove_product(self, codigo_barras: str) -> int:
        """Solicita eliminar todos los productos con el codigo indicado."""

    def find_by_barcode(self, codigo_barras: str) -> Producto | None:
        """Solicita el primer producto con el codigo indicado."""

    def find_by_name(self, text: str) -> list[Producto]:
        """Solicita productos cuyo nombre contiene el texto."""

    def find_by_expiry_date(self, cutoff: date) -> list[Producto]:
        """Solicita productos que vencen en o antes de la fecha."""

    def total_value(self) -> Decimal:
        """Solicita el valor total del inventario."""

    def expiring_within(self, days: int) -> list[Producto]:
        """Solicita el reporte de productos prontos a vencer."""


class LocalInventoryGateway:
    """Implementacion local del gateway usando un almacen en memoria."""

    def __init__(self, store: InventoryStore | None = None) -> None:
        self._store = store if store is not None else InventoryStore()

    def add_product(self, draft: ProductDraft) -> None:
        """Registra un producto nuevo delegando en el almacen."""
        try:
            self._store.add_product(draft.to_producto())
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al agregar producto.")
            raise ServiceError("No fue posible agregar el producto.") from exc

    def update_product(self, codigo_barras: str, changes: ProductUpdate) -> Producto | None:
        """Actualiza un producto existente."""
        try:
            return self._store.update_product(codigo_barras, changes)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al actualizar producto.")
            raise ServiceError("No fue posible actualizar el producto.") from exc

    def remove_product(self, codigo_barras: str) -> int:
        """Elimina productos por codigo de barras."""
        try:
            return self._store.remove_product(codigo_barras)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al eliminar producto.")
            raise ServiceError("No fue posible eliminar el producto.") from exc

    def find_by_barcode(self, codigo_barras: str) -> Producto | None:
        return self._run_query(self._store.find_by_barcode, codigo_barras)

    def find_by_name(self, text: str) -> list[Producto]:
        return self._run_query(self._store.find_by_name, text)

    def find_by_expiry_date(self, cutoff: date) -> list[Producto]:
        return self._run_query(self._store.find_by_expiry_date, cutoff)

    def total_value(self) -> Decimal:
        return self._run_query(self._store.total_value)

    def expiring_within(self, days: int) -> list[Producto]:
        return self._run_query(self._store.expiring_within, days)

    @staticmethod
    def _run_query(query: Callable[..., T], *args: object) -> T:
        """Ejecuta una consulta del almacen traduciendo fallos a ServiceError."""
        try:
            return query(*args)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado en consulta de inventario.")
            raise ServiceError("No fue posible consultar el inventario.") from exc
