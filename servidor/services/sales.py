"""Servicio de registro de ventas."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from servidor.domain.models import Sale
from servidor.domain.ordered_store import OrderedStore, OrderedView
from servidor.services.inventory import InventoryStore
from shared.errors import InsufficientStockError, NotFoundError, ValidationError

LOGGER = logging.getLogger(__name__)


class SaleLedger:
    """Historial ordenado de ventas, coordinado con el inventario."""

    def __init__(
        self,
        inventory: InventoryStore,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        if inventory is None:
            raise ValidationError("El servicio de inventario no puede ser nulo.")

        self._inventory = inventory
        self._clock = clock
        self._sales: OrderedStore[Sale] = OrderedStore()
        self._lock = threading.RLock()

    @property
    def inventory(self) -> InventoryStore:
        """Inventario sobre el que se registran las ventas."""
        return self._inventory

    def record_sale(self, product_id: str, quantity: int) -> Sale:
        """Registra una venta y descuenta el stock del producto.

        Todas las validaciones ocurren antes de mutar estado: si alguna falla,
        ni el inventario ni el historial cambian.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError("La cantidad vendida debe ser un numero entero.")
        if quantity <= 0:
            raise ValidationError("La cantidad vendida debe ser mayor a 0.")

        with self._inventory.lock, self._lock:
            product = self._inventory.find_by_id(product_id)
            if product is None:
                raise NotFoundError(product_id)

            if quantity > product.quantity:
                raise InsufficientStockError(
                    available=product.quantity,
                    requested=quantity,
                )

            sale = Sale(
                product_id=product_id,
                product_name=product.name,
                unit_price=product.price,
                quantity=quantity,
                created_at=self._clock(),
            )
            product.quantity -= quantity
            self._sales.append(sale)

        LOGGER.info("Venta registrada: %s", sale)
        return sale

    def list_sales(self) -> OrderedView[Sale]:
        """Recorre las ventas en orden de registro."""
        return self._sales.view()

    def all_sales(self) -> list[Sale]:
        """Copia del historial al momento de la llamada."""
        with self._lock:
            return list(self._sales)

    def sale_count(self) -> int:
        return self._sales.size()
