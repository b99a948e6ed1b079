"""Reportes agregados sobre inventario y ventas."""

from __future__ import annotations

import logging

from servidor.domain.models import Product, TopProductReport
from servidor.services.inventory import InventoryStore
from servidor.services.sales import SaleLedger
from shared.errors import ValidationError

LOGGER = logging.getLogger(__name__)


class ReportEngine:
    """Calcula reportes de solo lectura; nunca modifica inventario ni ventas."""

    def __init__(self, inventory: InventoryStore, sales: SaleLedger) -> None:
        if inventory is None:
            raise ValidationError("El servicio de inventario no puede ser nulo.")
        if sales is None:
            raise ValidationError("El servicio de ventas no puede ser nulo.")

        if sales.inventory is not inventory:
            raise ValidationError("El servicio de ventas usa un inventario distinto.")

        self._inventory = inventory
        self._sales = sales

    @property
    def inventory(self) -> InventoryStore:
        return self._inventory

    @property
    def sales(self) -> SaleLedger:
        return self._sales

    def total_product_count(self) -> int:
        """Cantidad de productos en inventario."""
        return self._inventory.product_count()

    def total_revenue(self) -> float:
        """Suma de los totales de todas las ventas registradas."""
        return sum((sale.total for sale in self._sales.all_sales()), 0.0)

    def top_selling_product(self) -> TopProductReport | None:
        """Producto con mayor recaudacion acumulada.

        Recorre el inventario en orden y solo reemplaza al lider cuando otro
        producto lo supera estrictamente, de modo que en empates gana el
        primero. Retorna None si no hay productos o ninguno tiene ventas.
        """
        revenue_by_id: dict[str, float] = {}
        quantity_by_id: dict[str, int] = {}
        for sale in self._sales.all_sales():
            revenue_by_id[sale.product_id] = revenue_by_id.get(sale.product_id, 0.0) + sale.total
            quantity_by_id[sale.product_id] = quantity_by_id.get(sale.product_id, 0) + sale.quantity

        top_product: Product | None = None
        highest_revenue = 0.0
        for product in self._inventory.all_products():
            revenue = revenue_by_id.get(product.product_id, 0.0)
            if revenue > highest_revenue:
                highest_revenue = revenue
                top_product = product

        if top_product is None:
            LOGGER.debug("Sin producto destacado: no hay ventas sobre productos vigentes.")
            return None

        return TopProductReport(
            product_id=top_product.product_id,
            name=top_product.name,
            current_price=top_product.price,
            revenue=highest_revenue,
            quantity_sold=quantity_by_id[top_product.product_id],
        )

    def out_of_stock_products(self) -> list[Product]:
        """Productos sin stock, en orden de inventario."""
        return [product for product in self._inventory.all_products() if product.out_of_stock]
