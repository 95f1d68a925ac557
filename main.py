import argparse
import logging
import sys

import structlog

import config
from controller import MainController
from datavisualization import render_sales_report
from errors import StoreError
from products import load_catalog
from receipts import ReceiptGenerator
from services import CartService, CheckoutService, CounterOrderIds, TimestampOrderIds
from transactions import FileOrderLog, MemoryOrderLog
from view import ConsoleView

logger = structlog.get_logger()


def configure_logging(verbose=False):
    # stdout belongs to the menu, logs go to stderr
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Terminal storefront simulator")
    parser.add_argument('--order-log', default=config.ORDER_LOG_PATH, help='Order log file (default: %(default)s)')
    parser.add_argument('--memory', action='store_true', help='Keep orders in memory only for this run')
    parser.add_argument('--order-ids', choices=config.ORDER_ID_STYLES, default=config.ORDER_ID_STYLE,
                        help='Order id style (default: %(default)s)')
    parser.add_argument('--receipts', default=config.RECEIPTS_DIR, help='Write a PNG receipt per order into this directory')
    parser.add_argument('--catalog', default=config.CATALOG_PATH, help='JSON product catalog to use instead of the built-in one')
    parser.add_argument('--report', metavar='PNG', help='Render a sales chart from the order log and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    args = parser.parse_args(argv)

    settings = config.Settings(
        order_log_path=args.order_log,
        order_backend='memory' if args.memory else config.ORDER_BACKEND,
        order_id_style=args.order_ids,
        receipts_dir=args.receipts,
        catalog_path=args.catalog,
        verbose=args.verbose,
    )
    return settings, args.report


def build_order_log(settings):
    if settings.order_backend == 'memory':
        return MemoryOrderLog()
    return FileOrderLog(settings.order_log_path)


def build_order_ids(settings, order_log):
    if settings.order_id_style == 'timestamp':
        return TimestampOrderIds()
    return CounterOrderIds.after(order_log.orders())


def build_controller(settings, view=None, read_line=input):
    catalog = load_catalog(settings.catalog_path)
    order_log = build_order_log(settings)
    receipts = ReceiptGenerator(settings.receipts_dir) if settings.receipts_dir else None
    checkout = CheckoutService(order_log, build_order_ids(settings, order_log), receipts)
    return MainController(
        CartService(catalog),
        checkout,
        order_log,
        view or ConsoleView(),
        read_line=read_line,
    )


def main(argv=None):
    settings, report_path = parse_args(argv)
    configure_logging(settings.verbose)
    logger.info(
        "store_starting",
        order_backend=settings.order_backend,
        order_log=settings.order_log_path,
        order_ids=settings.order_id_style,
    )

    view = ConsoleView()
    try:
        if report_path:
            path = render_sales_report(build_order_log(settings).orders(), report_path)
            view.info(f"Sales report written to {path}")
            return 0
        controller = build_controller(settings, view=view)
    except StoreError as e:
        view.error(str(e))
        return 1

    try:
        return controller.run()
    except KeyboardInterrupt:
        view.info("")
        return 0


if __name__ == "__main__":
    sys.exit(main())
