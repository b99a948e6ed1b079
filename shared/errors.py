"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class DuplicateKeyError(ServiceError):
    """Ya existe un producto con el mismo identificador."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Ya existe un producto con ID: {product_id}")
        self.product_id = product_id


class NotFoundError(ServiceError):
    """No existe un producto con el identificador solicitado."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Producto no encontrado: {product_id}")
        self.product_id = product_id


class InsufficientStockError(ServiceError):
    """La cantidad solicitada supera el stock disponible."""

    def __init__(self, available: int, requested: int) -> None:
        super().__init__(
            f"Stock insuficiente. Disponible: {available}, Solicitado: {requested}"
        )
        self.available = available
        self.requested = requested


class OutOfRangeError(IndexError):
    """Acceso por indice fuera de los limites de la coleccion."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Indice fuera de rango: {index}, tamano: {size}")
        self.index = index
        self.size = size
