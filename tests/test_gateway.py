"""Tests del gateway local cliente-servidor."""

from __future__ import annotations

import unittest
from unittest import mock

from cliente.backend.gateway import LocalServerGateway
from servidor.domain.models import Product
from servidor.services.inventory import InventoryStore
from servidor.services.reports import ReportEngine
from servidor.services.sales import SaleLedger
from shared.errors import (
    DuplicateKeyError,
    InsufficientStockError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from shared.protocol import (
    AddProductRequest,
    DeleteProductRequest,
    RecordSaleRequest,
    UpdateProductRequest,
)


class LocalServerGatewayTests(unittest.TestCase):
    """Valida el contrato de llamadas expuesto al cliente."""

    def setUp(self) -> None:
        self.gateway = LocalServerGateway()

    def _add(self, product_id: str, price: float, quantity: int) -> None:
        self.gateway.add_product(
            AddProductRequest(
                product_id=product_id,
                name=f"Producto {product_id}",
                price=price,
                quantity=quantity,
            )
        )

    def test_add_and_find_product(self) -> None:
        """Debe agregar y retornar copias de los valores del producto."""
        self._add("P001", 10.0, 5)

        snapshot = self.gateway.find_product("P001")

        self.assertIsNotNone(snapshot)
        self.assertEqual(snapshot.name, "Producto P001")
        self.assertFalse(snapshot.out_of_stock)
        self.assertIsNone(self.gateway.find_product("P404"))

    def test_errors_propagate_unchanged(self) -> None:
        """Errores de validacion y servicio deben llegar sin envolver."""
        self._add("P001", 10.0, 5)

        with self.assertRaises(DuplicateKeyError):
            self._add("P001", 10.0, 5)
        with self.assertRaises(ValidationError):
            self._add("P002", -1.0, 5)
        with self.assertRaises(NotFoundError):
            self.gateway.update_product(UpdateProductRequest("P404", "x", 1.0, 1))
        with self.assertRaises(InsufficientStockError):
            self.gateway.record_sale(RecordSaleRequest(product_id="P001", quantity=6))

    def test_unexpected_errors_are_wrapped(self) -> None:
        """Fallos inesperados deben convertirse en ServiceError."""
        inventory = InventoryStore()
        gateway = LocalServerGateway(inventory=inventory)

        with mock.patch.object(inventory, "add_product", side_effect=RuntimeError("boom")):
            with self.assertLogs("cliente.backend.gateway", level="ERROR"):
                with self.assertRaises(ServiceError) as ctx:
                    gateway.add_product(AddProductRequest("P001", "Casco", 1.0, 1))

        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_rejects_services_wired_to_other_inventory(self) -> None:
        """Servicios conectados a otro inventario deben rechazarse al construir."""
        inventory = InventoryStore()
        other_inventory = InventoryStore()
        other_sales = SaleLedger(other_inventory)
        other_reports = ReportEngine(other_inventory, other_sales)

        with self.assertRaises(ValidationError):
            LocalServerGateway(inventory=inventory, sales=other_sales)
        with self.assertRaises(ValidationError):
            LocalServerGateway(inventory=inventory, reports=other_reports)
        with self.assertRaises(ValidationError):
            LocalServerGateway(sales=SaleLedger(other_inventory), reports=other_reports)

    def test_derives_inventory_from_given_services(self) -> None:
        """Si solo se entregan ventas o reportes, el gateway usa su inventario."""
        inventory = InventoryStore()
        sales = SaleLedger(inventory)
        reports = ReportEngine(inventory, sales)
        inventory.add_product(Product("P001", "Casco", 10.0, 0))

        for gateway in (LocalServerGateway(sales=sales), LocalServerGateway(reports=reports)):
            with self.subTest(gateway=gateway):
                summary = gateway.get_report_summary()
                self.assertEqual(summary.total_products, 1)
                self.assertEqual([p.product_id for p in summary.out_of_stock], ["P001"])

    def test_read_paths_wrap_unexpected_errors(self) -> None:
        """Las consultas tambien deben convertir fallos inesperados en ServiceError."""
        inventory = InventoryStore()
        sales = SaleLedger(inventory)
        reports = ReportEngine(inventory, sales)
        gateway = LocalServerGateway(inventory=inventory, sales=sales, reports=reports)
        failures = (
            (inventory, "find_by_id", lambda: gateway.find_product("P001")),
            (inventory, "list_forward", gateway.list_products),
            (inventory, "list_backward", lambda: gateway.list_products(reverse=True)),
            (sales, "list_sales", gateway.list_sales),
            (reports, "top_selling_product", gateway.get_report_summary),
        )

        for target, attribute, call in failures:
            with self.subTest(attribute=attribute):
                with mock.patch.object(target, attribute, side_effect=RuntimeError("boom")):
                    with self.assertLogs("cliente.backend.gateway", level="ERROR"):
                        with self.assertRaises(ServiceError) as ctx:
                            call()
                self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_update_reports_before_and_after(self) -> None:
        """La respuesta de actualizacion trae valores previos y nuevos."""
        self._add("P001", 10.0, 5)

        response = self.gateway.update_product(
            UpdateProductRequest(product_id="P001", name="Casco", price=12.0, quantity=3)
        )

        self.assertEqual(response.old_name, "Producto P001")
        self.assertEqual(response.new_name, "Casco")
        self.assertEqual((response.old_price, response.new_price), (10.0, 12.0))
        self.assertEqual((response.old_quantity, response.new_quantity), (5, 3))

    def test_delete_product(self) -> None:
        """Eliminar informa si el producto existia."""
        self._add("P001", 10.0, 5)

        self.assertTrue(self.gateway.delete_product(DeleteProductRequest("P001")).deleted)
        self.assertFalse(self.gateway.delete_product(DeleteProductRequest("P001")).deleted)

    def test_list_products_in_both_orders(self) -> None:
        """Debe listar en orden de insercion e inverso."""
        for product_id in ("P001", "P002"):
            self._add(product_id, 10.0, 1)

        forward = self.gateway.list_products().products
        backward = self.gateway.list_products(reverse=True).products

        self.assertEqual([p.product_id for p in forward], ["P001", "P002"])
        self.assertEqual([p.product_id for p in backward], ["P002", "P001"])

    def test_record_sale_and_list_sales(self) -> None:
        """Registrar una venta retorna el stock restante y aparece en el listado."""
        self._add("P001", 10.0, 5)

        response = self.gateway.record_sale(RecordSaleRequest(product_id="P001", quantity=3))
        sales = self.gateway.list_sales().sales

        self.assertEqual(response.remaining_stock, 2)
        self.assertEqual(response.sale.total, 30.0)
        self.assertEqual(len(sales), 1)
        self.assertEqual(sales[0].sale_id, response.sale.sale_id)

    def test_snapshots_do_not_track_later_changes(self) -> None:
        """Las copias entregadas al cliente no cambian con mutaciones posteriores."""
        self._add("P001", 10.0, 5)
        snapshot = self.gateway.find_product("P001")

        self.gateway.record_sale(RecordSaleRequest(product_id="P001", quantity=2))

        self.assertEqual(snapshot.quantity, 5)
        self.assertEqual(self.gateway.find_product("P001").quantity, 3)

    def test_report_summary(self) -> None:
        """El resumen combina conteo, recaudacion, destacado y agotados."""
        self._add("P001", 10.0, 3)
        self._add("P002", 50.0, 5)
        self.gateway.record_sale(RecordSaleRequest(product_id="P001", quantity=3))
        self.gateway.record_sale(RecordSaleRequest(product_id="P002", quantity=1))

        summary = self.gateway.get_report_summary()

        self.assertEqual(summary.total_products, 2)
        self.assertEqual(summary.total_revenue, 80.0)
        self.assertEqual(summary.top_product.product_id, "P002")
        self.assertEqual(summary.top_product.current_price, 50.0)
        self.assertEqual([p.product_id for p in summary.out_of_stock], ["P001"])

    def test_report_summary_without_sales(self) -> None:
        """Sin ventas el resumen no tiene producto destacado."""
        summary = self.gateway.get_report_summary()

        self.assertIsNone(summary.top_product)
        self.assertEqual(summary.total_revenue, 0)
        self.assertEqual(summary.out_of_stock, [])


if __name__ == "__main__":
    unittest.main()
