"""Tests del gateway local de inventario."""

from __future__ import annotations

import unittest
from datetime import date
from decimal import Decimal
from unittest import mock

from cliente.backend.gateway import LocalInventoryGateway
from servidor.services.inventory_store import InventoryStore
from shared.errors import ServiceError
from shared.protocol import ProductDraft, ProductUpdate


class LocalInventoryGatewayTests(unittest.TestCase):
    """Valida delegacion al almacen y traduccion de errores."""

    def setUp(self) -> None:
        self.store = InventoryStore()
        self.gateway = LocalInventoryGateway(store=self.store)

    def test_add_and_query_delegate_to_store(self) -> None:
        """Debe registrar el draft y exponer las consultas del almacen."""
        self.gateway.add_product(
            ProductDraft(
                nombre="Yogurt",
                codigo_barras="780",
                cantidad=4,
                precio_unitario=Decimal("0.75"),
                fecha_vencimiento=date(2026, 5, 1),
            )
        )

        self.assertEqual(len(self.store), 1)
        self.assertEqual(self.gateway.find_by_barcode("780").nombre, "Yogurt")
        self.assertEqual(self.gateway.total_value(), Decimal("3.00"))
        self.assertEqual(len(self.gateway.find_by_name("YOG")), 1)
        self.assertEqual(len(self.gateway.find_by_expiry_date(date(2026, 4, 30))), 0)

    def test_update_missing_returns_none(self) -> None:
        """Debe propagar el no-op del almacen como None."""
        self.assertIsNone(self.gateway.update_product("000", ProductUpdate(cantidad=1)))

    def test_unexpected_error_is_wrapped_in_service_error(self) -> None:
        """Un fallo inesperado del almacen debe llegar como ServiceError encadenado."""
        with mock.patch.object(
            self.store,
            "total_value",
            side_effect=RuntimeError("boom"),
        ), self.assertLogs("cliente.backend.gateway", level="ERROR"):
            with self.assertRaises(ServiceError) as context:
                self.gateway.total_value()

        self.assertIsInstance(context.exception.__cause__, RuntimeError)

    def test_service_error_is_not_rewrapped(self) -> None:
        """Un ServiceError del almacen debe propagarse tal cual."""
        original = ServiceError("original")
        with mock.patch.object(self.store, "remove_product", side_effect=original):
            with self.assertRaises(ServiceError) as context:
                self.gateway.remove_product("001")

        self.assertIs(context.exception, original)


if __name__ == "__main__":
    unittest.main()
