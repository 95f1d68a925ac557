import os

# Defaults, overridable through the environment and then the command line.
ORDER_LOG_PATH = os.environ.get("STORE_ORDER_LOG", "orders.log")
# "file" keeps orders in ORDER_LOG_PATH, "memory" only for this run
ORDER_BACKEND = os.environ.get("STORE_ORDER_BACKEND", "file")
# "counter" (1, 2, 3, ...) or "timestamp" (ORD<unix seconds>)
ORDER_ID_STYLE = os.environ.get("STORE_ORDER_IDS", "counter")
RECEIPTS_DIR = os.environ.get("STORE_RECEIPTS_DIR") or None
CATALOG_PATH = os.environ.get("STORE_CATALOG") or None

ORDER_BACKENDS = ("file", "memory")
ORDER_ID_STYLES = ("counter", "timestamp")


class Settings:
    def __init__(
        self,
        order_log_path=ORDER_LOG_PATH,
        order_backend=ORDER_BACKEND,
        order_id_style=ORDER_ID_STYLE,
        receipts_dir=RECEIPTS_DIR,
        catalog_path=CATALOG_PATH,
        verbose=False,
    ):
        if order_backend not in ORDER_BACKENDS:
            raise ValueError(f"order backend must be one of {ORDER_BACKENDS}, got {order_backend!r}")
        if order_id_style not in ORDER_ID_STYLES:
            raise ValueError(f"order id style must be one of {ORDER_ID_STYLES}, got {order_id_style!r}")
        self.order_log_path = order_log_path
        self.order_backend = order_backend
        self.order_id_style = order_id_style
        self.receipts_dir = receipts_dir
        self.catalog_path = catalog_path
        self.verbose = verbose
