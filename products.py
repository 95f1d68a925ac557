import json

import structlog

from errors import CatalogError, InvalidProductIdError
from models import Product

logger = structlog.get_logger()

# (id, name, price)
DEFAULT_PRODUCTS = [
    (1, "Laptop", 999.99),
    (2, "Smartphone", 599.99),
    (3, "Headphones", 99.99),
    (4, "Mouse", 19.99),
    (5, "Keyboard", 49.99),
]


class Catalog:
    """Fixed, read-only list of products for the whole run."""

    def __init__(self, products):
        self._products = []
        seen = set()
        for p in products:
            _validate_product(p)
            if p.id in seen:
                raise CatalogError(f"Duplicate product id: {p.id}")
            seen.add(p.id)
            self._products.append(p)

    def list_products(self):
        return list(self._products)

    def get_product(self, id):
        for p in self._products:
            if p.id == id:
                return p
        raise InvalidProductIdError(id)

    def __len__(self):
        return len(self._products)


def _validate_product(p):
    if p.id <= 0:
        raise CatalogError(f"Product id must be positive: {p.id}")
    if not p.name.strip():
        raise CatalogError(f"Product {p.id} has an empty name")
    # names go into tab separated order log lines
    if "\t" in p.name or "\n" in p.name or "\r" in p.name:
        raise CatalogError(f"Product {p.id} name contains a tab or newline")
    if p.price < 0:
        raise CatalogError(f"Product {p.id} has a negative price")


def default_catalog():
    return Catalog(Product(id, name, price) for id, name, price in DEFAULT_PRODUCTS)


def load_catalog(path=None):
    """Build a catalog from a JSON file of ``{"id", "name", "price"}`` objects.

    With no path the built-in catalog is returned.
    """
    if path is None:
        return default_catalog()

    try:
        with open(path, "r", encoding="utf-8") as fh:
            rows = json.load(fh)
    except (OSError, ValueError) as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e

    if not isinstance(rows, list):
        raise CatalogError(f"Catalog {path} must be a JSON list")

    products = []
    for row in rows:
        try:
            products.append(Product(row["id"], row["name"], row["price"]))
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Bad catalog entry {row!r}") from e

    catalog = Catalog(products)
    logger.info("catalog_loaded", path=str(path), products=len(catalog))
    return catalog
