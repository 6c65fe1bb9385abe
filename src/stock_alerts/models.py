from django.db import models


class Company(models.Model):
    """
    Tenant. Owns warehouses; everything an alert lookup reads is scoped
    through a company's warehouses.
    """

    name = models.CharField(max_length=255)

    def __str__(self) -> str:
        return self.name


class Warehouse(models.Model):
    company = models.ForeignKey(
        Company, on_delete=models.CASCADE, related_name="warehouses"
    )
    name = models.CharField(max_length=255)
    address = models.TextField(blank=True, default="")

    def __str__(self) -> str:
        return self.name


class ProductType(models.Model):
    """
    Product category carrying the low-stock threshold for all its products.
    """

    name = models.CharField(max_length=255)
    low_stock_threshold = models.PositiveIntegerField(default=0)

    def __str__(self) -> str:
        return f"{self.name} (threshold {self.low_stock_threshold})"


class Product(models.Model):
    name = models.CharField(max_length=255)
    sku = models.CharField(max_length=64, unique=True)
    product_type = models.ForeignKey(
        ProductType, on_delete=models.PROTECT, related_name="products"
    )
    price = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    def __str__(self) -> str:
        return f"{self.name} ({self.sku})"


class BundleProduct(models.Model):
    """
    A product sold as a bundle of other products.
    """

    bundle = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="bundle_items"
    )
    component = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="part_of_bundles"
    )
    quantity = models.PositiveIntegerField(default=1)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["bundle", "component"], name="uniq_bundle_component"
            ),
        ]


class Inventory(models.Model):
    """
    Stock of one product at one warehouse.
    """

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="inventory"
    )
    warehouse = models.ForeignKey(
        Warehouse, on_delete=models.CASCADE, related_name="inventory"
    )
    quantity = models.PositiveIntegerField(default=0)

    class Meta:
        verbose_name_plural = "inventory"
        constraints = [
            models.UniqueConstraint(
                fields=["product", "warehouse"], name="uniq_inventory_product_warehouse"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_id}@{self.warehouse_id} ({self.quantity})"


class Sale(models.Model):
    """
    Append-only record of a demand event.
    """

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="sales"
    )
    warehouse = models.ForeignKey(
        Warehouse, on_delete=models.SET_NULL, null=True, blank=True, related_name="sales"
    )
    quantity = models.PositiveIntegerField(default=1)
    sale_date = models.DateTimeField()

    class Meta:
        indexes = [
            models.Index(fields=["product", "sale_date"], name="sale_product_date_idx"),
        ]


class Supplier(models.Model):
    name = models.CharField(max_length=255)
    contact_email = models.EmailField()

    def __str__(self) -> str:
        return self.name


class ProductSupplier(models.Model):
    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="product_suppliers"
    )
    supplier = models.ForeignKey(
        Supplier, on_delete=models.CASCADE, related_name="product_suppliers"
    )

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["product", "supplier"], name="uniq_product_supplier"
            ),
        ]
