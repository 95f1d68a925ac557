import json
import os
import tempfile
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from errors import CatalogError, InvalidProductIdError
from models import Product
from products import Catalog, default_catalog, load_catalog


class CatalogTests(unittest.TestCase):
    def test_default_catalog_contents(self):
        products = default_catalog().list_products()
        self.assertEqual(
            [(p.id, p.name, p.price) for p in products],
            [
                (1, 'Laptop', 999.99),
                (2, 'Smartphone', 599.99),
                (3, 'Headphones', 99.99),
                (4, 'Mouse', 19.99),
                (5, 'Keyboard', 49.99),
            ],
        )

    def test_get_product(self):
        self.assertEqual(default_catalog().get_product(3).name, 'Headphones')

    def test_unknown_id_raises(self):
        with self.assertRaises(InvalidProductIdError) as ctx:
            default_catalog().get_product(42)
        self.assertEqual(ctx.exception.product_id, 42)

    def test_list_products_cannot_mutate_catalog(self):
        catalog = default_catalog()
        catalog.list_products().clear()
        self.assertEqual(len(catalog), 5)

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(CatalogError):
            Catalog([Product(1, 'A', 1.0), Product(1, 'B', 2.0)])

    def test_invalid_products_rejected(self):
        bad = [
            Product(0, 'Zero', 1.0),
            Product(1, '  ', 1.0),
            Product(1, 'Tab\tName', 1.0),
            Product(1, 'Cheap', -0.01),
        ]
        for p in bad:
            with self.assertRaises(CatalogError):
                Catalog([p])


class LoadCatalogTests(unittest.TestCase):
    def _write(self, payload):
        tf = tempfile.NamedTemporaryFile('w', suffix='.json', delete=False, encoding='utf-8')
        if isinstance(payload, str):
            tf.write(payload)
        else:
            json.dump(payload, tf)
        tf.close()
        self.addCleanup(os.unlink, tf.name)
        return tf.name

    def test_no_path_gives_default_catalog(self):
        self.assertEqual(len(load_catalog(None)), 5)

    def test_loads_json_catalog(self):
        path = self._write([{'id': 7, 'name': 'Monitor', 'price': 149.5}])
        catalog = load_catalog(path)
        self.assertEqual(catalog.get_product(7), Product(7, 'Monitor', 149.5))

    def test_bad_entry_raises(self):
        path = self._write([{'id': 7, 'price': 1.0}])
        with self.assertRaises(CatalogError):
            load_catalog(path)

    def test_not_a_list_raises(self):
        path = self._write({'id': 1})
        with self.assertRaises(CatalogError):
            load_catalog(path)

    def test_unreadable_json_raises(self):
        path = self._write('not json')
        with self.assertRaises(CatalogError):
            load_catalog(path)

    def test_missing_file_raises(self):
        with self.assertRaises(CatalogError):
            load_catalog(os.path.join(tempfile.gettempdir(), 'no-such-catalog-file.json'))


if __name__ == '__main__':
    unittest.main()
