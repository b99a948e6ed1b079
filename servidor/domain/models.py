"""Modelos de dominio de inventario y ventas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4

from parametros import DISPLAY_DECIMALS, TIMESTAMP_FORMAT


def _new_sale_id() -> str:
    return str(uuid4())


@dataclass(slots=True)
class Product:
    """Representa un producto en inventario."""

    product_id: str
    name: str
    price: float
    quantity: int

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "product_id" and hasattr(self, "product_id"):
            raise AttributeError("El ID de un producto no se puede modificar.")
        object.__setattr__(self, name, value)

    @property
    def out_of_stock(self) -> bool:
        """Indica si el producto no tiene unidades disponibles."""
        return self.quantity == 0

    def __str__(self) -> str:
        return (
            f"Product[ID={self.product_id}, Name={self.name}, "
            f"Price={self.price:.{DISPLAY_DECIMALS}f}, Quantity={self.quantity}]"
        )


@dataclass(slots=True)
class Sale:
    """Registro de una venta contra un producto.

    Nombre y precio unitario son una copia del producto al momento de la venta,
    por lo que no cambian si el producto se actualiza despues. El total se
    calcula en cada lectura a partir de ``unit_price`` y ``quantity``.
    """

    product_id: str
    product_name: str
    unit_price: float
    quantity: int
    created_at: datetime
    sale_id: str = field(default_factory=_new_sale_id)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("sale_id", "product_id") and hasattr(self, name):
            raise AttributeError(f"El campo {name} de una venta no se puede modificar.")
        object.__setattr__(self, name, value)

    @property
    def total(self) -> float:
        """Monto total de la venta."""
        return self.unit_price * self.quantity

    def __str__(self) -> str:
        return (
            f"Sale[ID={self.sale_id}, Product={self.product_name}, "
            f"Unit Price={self.unit_price:.{DISPLAY_DECIMALS}f}, "
            f"Quantity={self.quantity}, "
            f"Total={self.total:.{DISPLAY_DECIMALS}f}, "
            f"Date={self.created_at.strftime(TIMESTAMP_FORMAT)}]"
        )


@dataclass(slots=True, frozen=True)
class ProductChange:
    """Valores previos y nuevos de una actualizacion de producto."""

    product_id: str
    old_name: str
    new_name: str
    old_price: float
    new_price: float
    old_quantity: int
    new_quantity: int


@dataclass(slots=True, frozen=True)
class TopProductReport:
    """Resultado del reporte de producto con mayores ventas."""

    product_id: str
    name: str
    current_price: float
    revenue: float
    quantity_sold: int
