"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True)
class ProductSnapshot:
    """Copia de los valores de un producto para mostrar en el cliente."""

    product_id: str
    name: str
    price: float
    quantity: int
    out_of_stock: bool


@dataclass(slots=True)
class SaleSnapshot:
    """Copia de los valores de una venta para mostrar en el cliente."""

    sale_id: str
    product_id: str
    product_name: str
    unit_price: float
    quantity: int
    total: float
    created_at: datetime


@dataclass(slots=True)
class TopProductSnapshot:
    """Producto con mayores ventas y sus acumulados."""

    product_id: str
    name: str
    current_price: float
    revenue: float
    quantity_sold: int


@dataclass(slots=True)
class AddProductRequest:
    """Solicitud para agregar un producto al inventario."""

    product_id: str
    name: str
    price: float
    quantity: int


@dataclass(slots=True)
class AddProductResponse:
    """Respuesta con el producto agregado."""

    product: ProductSnapshot


@dataclass(slots=True)
class UpdateProductRequest:
    """Solicitud para actualizar nombre, precio y cantidad de un producto."""

    product_id: str
    name: str
    price: float
    quantity: int


@dataclass(slots=True)
class UpdateProductResponse:
    """Respuesta con los valores previos y nuevos del producto."""

    product_id: str
    old_name: str
    new_name: str
    old_price: float
    new_price: float
    old_quantity: int
    new_quantity: int


@dataclass(slots=True)
class DeleteProductRequest:
    """Solicitud para eliminar un producto."""

    product_id: str


@dataclass(slots=True)
class DeleteProductResponse:
    """Respuesta de eliminacion; deleted es False si el ID no existia."""

    product_id: str
    deleted: bool


@dataclass(slots=True)
class ListProductsResponse:
    """Listado de productos en el orden solicitado."""

    products: list[ProductSnapshot] = field(default_factory=list)


@dataclass(slots=True)
class RecordSaleRequest:
    """Solicitud para registrar una venta."""

    product_id: str
    quantity: int


@dataclass(slots=True)
class RecordSaleResponse:
    """Respuesta con la venta registrada y el stock restante."""

    sale: SaleSnapshot
    remaining_stock: int


@dataclass(slots=True)
class ListSalesResponse:
    """Listado de ventas en orden de registro."""

    sales: list[SaleSnapshot] = field(default_factory=list)


@dataclass(slots=True)
class ReportSummaryResponse:
    """Resumen de reportes de inventario y ventas."""

    total_products: int
    total_revenue: float
    top_product: TopProductSnapshot | None
    out_of_stock: list[ProductSnapshot] = field(default_factory=list)
