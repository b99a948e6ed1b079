"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

from servidor.domain.models import Product, Sale
from servidor.services.inventory import InventoryStore
from servidor.services.reports import ReportEngine
from servidor.services.sales import SaleLedger
from shared.errors import ServiceError, ValidationError
from shared.protocol import (
    AddProductRequest,
    AddProductResponse,
    DeleteProductRequest,
    DeleteProductResponse,
    ListProductsResponse,
    ListSalesResponse,
    ProductSnapshot,
    RecordSaleRequest,
    RecordSaleResponse,
    ReportSummaryResponse,
    SaleSnapshot,
    TopProductSnapshot,
    UpdateProductRequest,
    UpdateProductResponse,
)

LOGGER = logging.getLogger(__name__)

R = TypeVar("R")


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Solicita agregar un producto."""

    def update_product(self, request: UpdateProductRequest) -> UpdateProductResponse:
        """Solicita actualizar un producto existente."""

    def delete_product(self, request: DeleteProductRequest) -> DeleteProductResponse:
        """Solicita eliminar un producto."""

    def find_product(self, product_id: str) -> ProductSnapshot | None:
        """Busca un producto por ID."""

    def list_products(self, reverse: bool = False) -> ListProductsResponse:
        """Lista productos en orden de insercion o inverso."""

    def record_sale(self, request: RecordSaleRequest) -> RecordSaleResponse:
        """Solicita registrar una venta."""

    def list_sales(self) -> ListSalesResponse:
        """Lista las ventas registradas."""

    def get_report_summary(self) -> ReportSummaryResponse:
        """Solicita el resumen de reportes."""


class LocalServerGateway:
    """Implementacion local del gateway usando servicios en memoria."""

    def __init__(
        self,
        inventory: InventoryStore | None = None,
        sales: SaleLedger | None = None,
        reports: ReportEngine | None = None,
    ) -> None:
        if inventory is None:
            if sales is not None:
                inventory = sales.inventory
            elif reports is not None:
                inventory = reports.inventory
            else:
                inventory = InventoryStore()
        if sales is None:
            sales = reports.sales if reports is not None else SaleLedger(inventory)
        if sales.inventory is not inventory:
            raise ValidationError("El servicio de ventas usa un inventario distinto al del gateway.")
        if reports is None:
            reports = ReportEngine(inventory, sales)
        if reports.inventory is not inventory or reports.sales is not sales:
            raise ValidationError("El servicio de reportes usa servicios distintos a los del gateway.")

        self._inventory = inventory
        self._sales = sales
        self._reports = reports

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Agrega un producto delegando en el inventario."""
        product = self._call(
            lambda: self._inventory.add_product(
                Product(
                    product_id=request.product_id,
                    name=request.name,
                    price=request.price,
                    quantity=request.quantity,
                )
            ),
            "No fue posible agregar el producto.",
        )
        return AddProductResponse(product=_product_snapshot(product))

    def update_product(self, request: UpdateProductRequest) -> UpdateProductResponse:
        """Actualiza un producto y retorna sus valores previos y nuevos."""
        change = self._call(
            lambda: self._inventory.update_product(
                request.product_id,
                request.name,
                request.price,
                request.quantity,
            ),
            "No fue posible actualizar el producto.",
        )
        return UpdateProductResponse(
            product_id=change.product_id,
            old_name=change.old_name,
            new_name=change.new_name,
            old_price=change.old_price,
            new_price=change.new_price,
            old_quantity=change.old_quantity,
            new_quantity=change.new_quantity,
        )

    def delete_product(self, request: DeleteProductRequest) -> DeleteProductResponse:
        """Elimina un producto; un ID inexistente no es error."""
        deleted = self._call(
            lambda: self._inventory.delete_product(request.product_id),
            "No fue posible eliminar el producto.",
        )
        return DeleteProductResponse(product_id=request.product_id, deleted=deleted)

    def find_product(self, product_id: str) -> ProductSnapshot | None:
        """Busca un producto y retorna una copia de sus valores."""
        product = self._call(
            lambda: self._inventory.find_by_id(product_id),
            "No fue posible buscar el producto.",
        )
        if product is None:
            return None
        return _product_snapshot(product)

    def list_products(self, reverse: bool = False) -> ListProductsResponse:
        if reverse:
            products = self._call(
                lambda: _product_snapshots(self._inventory.list_backward()),
                "No fue posible listar los productos.",
            )
        else:
            products = self._call(
                lambda: _product_snapshots(self._inventory.list_forward()),
                "No fue posible listar los productos.",
            )
        return ListProductsResponse(products=products)

    def record_sale(self, request: RecordSaleRequest) -> RecordSaleResponse:
        """Registra una venta y retorna el stock que queda del producto."""
        sale = self._call(
            lambda: self._sales.record_sale(request.product_id, request.quantity),
            "No fue posible registrar la venta.",
        )
        product = self._call(
            lambda: self._inventory.find_by_id(sale.product_id),
            "No fue posible consultar el stock restante.",
        )
        remaining_stock = product.quantity if product is not None else 0
        return RecordSaleResponse(
            sale=_sale_snapshot(sale),
            remaining_stock=remaining_stock,
        )

    def list_sales(self) -> ListSalesResponse:
        sales = self._call(
            lambda: [_sale_snapshot(sale) for sale in self._sales.list_sales()],
            "No fue posible listar las ventas.",
        )
        return ListSalesResponse(sales=sales)

    def get_report_summary(self) -> ReportSummaryResponse:
        """Arma el resumen de reportes en una sola respuesta."""
        return self._call(self._build_report_summary, "No fue posible generar los reportes.")

    def _build_report_summary(self) -> ReportSummaryResponse:
        top_product = self._reports.top_selling_product()
        top_snapshot = None
        if top_product is not None:
            top_snapshot = TopProductSnapshot(
                product_id=top_product.product_id,
                name=top_product.name,
                current_price=top_product.current_price,
                revenue=top_product.revenue,
                quantity_sold=top_product.quantity_sold,
            )

        return ReportSummaryResponse(
            total_products=self._reports.total_product_count(),
            total_revenue=self._reports.total_revenue(),
            top_product=top_snapshot,
            out_of_stock=_product_snapshots(self._reports.out_of_stock_products()),
        )

    @staticmethod
    def _call(operation: Callable[[], R], error_message: str) -> R:
        """Ejecuta una operacion de servicio envolviendo fallos inesperados."""
        try:
            return operation()
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado en gateway: %s", error_message)
            raise ServiceError(error_message) from exc


def _product_snapshot(product: Product) -> ProductSnapshot:
    return ProductSnapshot(
        product_id=product.product_id,
        name=product.name,
        price=product.price,
        quantity=product.quantity,
        out_of_stock=product.out_of_stock,
    )


def _product_snapshots(products: Iterable[Product]) -> list[ProductSnapshot]:
    return [_product_snapshot(product) for product in products]


def _sale_snapshot(sale: Sale) -> SaleSnapshot:
    return SaleSnapshot(
        sale_id=sale.sale_id,
        product_id=sale.product_id,
        product_name=sale.product_name,
        unit_price=sale.unit_price,
        quantity=sale.quantity,
        total=sale.total,
        created_at=sale.created_at,
    )
