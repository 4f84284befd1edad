"""Tests para parseo de entradas del cliente."""

from __future__ import annotations

import unittest
from datetime import date
from decimal import Decimal

from cliente.backend.validators import (
    parse_date,
    parse_days,
    parse_optional,
    parse_price,
    parse_quantity,
    require_text,
)
from shared.errors import ValidationError


class ValidatorsTests(unittest.TestCase):
    """Valida parseo de numeros, fechas y textos requeridos."""

    def test_parse_quantity(self) -> None:
        """Debe parsear enteros ignorando espacios."""
        self.assertEqual(parse_quantity(" 12 "), 12)

    def test_parse_quantity_rejects_negative_and_text(self) -> None:
        """Debe rechazar cantidades negativas o no numericas."""
        with self.assertRaises(ValidationError):
            parse_quantity("-1")
        with self.assertRaises(ValidationError):
            parse_quantity("doce")

    def test_parse_price_accepts_dot_and_comma(self) -> None:
        """Debe aceptar punto o coma como separador decimal."""
        self.assertEqual(parse_price("9.99"), Decimal("9.99"))
        self.assertEqual(parse_price("2,50"), Decimal("2.50"))

    def test_parse_price_rejects_invalid_values(self) -> None:
        """Debe rechazar texto libre y valores no finitos."""
        for raw in ("abc", "", "NaN", "Infinity"):
            with self.subTest(raw=raw), self.assertRaises(ValidationError):
                parse_price(raw)

    def test_parse_price_out_of_range_is_validation_error(self) -> None:
        """Precios que no caben en centavos deben rechazarse como entrada invalida."""
        for raw in ("1e30", "1" * 27, "9" * 30 + ".5"):
            with self.subTest(raw=raw), self.assertRaises(ValidationError):
                parse_price(raw)

        self.assertEqual(parse_price("1" * 26), Decimal("1" * 26))

    def test_numbers_require_ascii_digits(self) -> None:
        """Debe rechazar separadores '_' y digitos no ASCII."""
        for parser, raw in (
            (parse_quantity, "1_000"),
            (parse_quantity, "\u0661\u0662"),
            (parse_days, "1_0"),
            (parse_days, "\u0663"),
            (parse_price, "1_0.50"),
            (parse_price, "\u0661.\u0665"),
        ):
            with self.subTest(parser=parser.__name__, raw=raw), self.assertRaises(ValidationError):
                parser(raw)

        self.assertEqual(parse_quantity("+5"), 5)
        self.assertEqual(parse_price(",5"), Decimal("0.5"))

    def test_parse_date_uses_day_month_year(self) -> None:
        """Debe interpretar fechas como dd/mm/aaaa."""
        self.assertEqual(parse_date("05/11/2026"), date(2026, 11, 5))

    def test_parse_date_invalid_mentions_format(self) -> None:
        """El error debe indicar el formato esperado."""
        with self.assertRaises(ValidationError) as context:
            parse_date("2026-11-05")
        self.assertIn("dd/mm/aaaa", str(context.exception))

    def test_parse_days_allows_negative(self) -> None:
        """Debe permitir dias negativos."""
        self.assertEqual(parse_days("-3"), -3)
        with self.assertRaises(ValidationError):
            parse_days("siete")

    def test_parse_optional_blank_returns_none(self) -> None:
        """Una entrada vacia no debe invocar al parser."""
        self.assertIsNone(parse_optional("   ", parse_quantity))
        self.assertEqual(parse_optional("4", parse_quantity), 4)

    def test_require_text(self) -> None:
        """Debe limpiar espacios y rechazar textos vacios."""
        self.assertEqual(require_text("  Leche ", "El nombre"), "Leche")
        with self.assertRaises(ValidationError):
            require_text("  ", "El nombre")


if __name__ == "__main__":
    unittest.main()
