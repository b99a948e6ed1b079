"""Servicio de inventario de productos en memoria."""

from __future__ import annotations

import logging
import math
import threading

from servidor.domain.models import Product, ProductChange
from servidor.domain.ordered_store import OrderedStore, OrderedView
from shared.errors import DuplicateKeyError, NotFoundError, ValidationError

LOGGER = logging.getLogger(__name__)


class InventoryStore:
    """Administra los productos del inventario con IDs unicos."""

    def __init__(self) -> None:
        self._products: OrderedStore[Product] = OrderedStore()
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Lock que serializa las mutaciones del inventario."""
        return self._lock

    def add_product(self, product: Product) -> Product:
        """Agrega un producto nuevo al final del inventario."""
        if product is None:
            raise ValidationError("El producto no puede ser nulo.")

        with self._lock:
            if self.find_by_id(product.product_id) is not None:
                raise DuplicateKeyError(product.product_id)

            self._validate_product_id(product.product_id)
            self._validate_values(product.price, product.quantity)
            self._products.append(product)

        LOGGER.info("Producto agregado: %s", product.name)
        LOGGER.debug("Detalle de producto agregado: %s", product)
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        """Busca un producto por ID; retorna None si no existe."""
        for product in self._products:
            if product.product_id == product_id:
                return product
        return None

    def update_product(
        self,
        product_id: str,
        name: str,
        price: float,
        quantity: int,
    ) -> ProductChange:
        """Sobrescribe nombre, precio y cantidad de un producto existente."""
        with self._lock:
            product = self.find_by_id(product_id)
            if product is None:
                raise NotFoundError(product_id)

            self._validate_values(price, quantity)

            change = ProductChange(
                product_id=product_id,
                old_name=product.name,
                new_name=name,
                old_price=product.price,
                new_price=price,
                old_quantity=product.quantity,
                new_quantity=quantity,
            )
            product.name = name
            product.price = price
            product.quantity = quantity

        LOGGER.info(
            "Producto actualizado %s: Nombre(%s -> %s), Precio(%s -> %s), Cantidad(%s -> %s)",
            product_id,
            change.old_name,
            change.new_name,
            change.old_price,
            change.new_price,
            change.old_quantity,
            change.new_quantity,
        )
        return change

    def delete_product(self, product_id: str) -> bool:
        """Elimina el producto con el ID indicado.

        Si el ID no existe no se considera error: retorna False y el
        inventario queda igual.
        """
        with self._lock:
            for index, product in enumerate(self._products):
                if product.product_id == product_id:
                    self._products.remove_at(index)
                    break
            else:
                LOGGER.debug("Eliminacion ignorada, producto inexistente: %s", product_id)
                return False

        LOGGER.info("Producto eliminado: %s", product.name)
        return True

    def list_forward(self) -> OrderedView[Product]:
        """Recorre los productos en orden de insercion."""
        return self._products.view()

    def list_backward(self) -> OrderedView[Product]:
        """Recorre los productos en orden inverso de insercion."""
        return self._products.view(reverse=True)

    def all_products(self) -> OrderedView[Product]:
        """Vista de solo lectura del inventario para servicios colaboradores."""
        return self._products.view()

    def product_count(self) -> int:
        return self._products.size()

    @staticmethod
    def _validate_product_id(product_id: str) -> None:
        if not isinstance(product_id, str) or not product_id.strip():
            raise ValidationError("El ID del producto no puede estar vacio.")

    @staticmethod
    def _validate_values(price: float, quantity: int) -> None:
        """Valida precio finito y cantidad entera, ambos no negativos."""
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValidationError("El precio del producto debe ser numerico.")
        if not math.isfinite(price):
            raise ValidationError("El precio del producto debe ser un numero finito.")
        if price < 0:
            raise ValidationError("El precio del producto no puede ser menor a 0.")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError("La cantidad del producto debe ser un numero entero.")
        if quantity < 0:
            raise ValidationError("La cantidad del producto no puede ser menor a 0.")
