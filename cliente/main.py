"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import logging

from cliente.backend.controller import InventoryController
from cliente.backend.gateway import LocalInventoryGateway
from cliente.frontend.console import ConsoleMenu
from servidor.services.inventory_store import InventoryStore

LOGGER = logging.getLogger(__name__)


def main() -> int:
    """Ejecuta el menu de inventario en consola."""
    gateway = LocalInventoryGateway(store=InventoryStore())
    controller = InventoryController(gateway=gateway)
    menu = ConsoleMenu(controller=controller)

    LOGGER.info("Aplicacion iniciada.")
    menu.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
