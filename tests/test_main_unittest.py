import io
import os
import shutil
import tempfile
import unittest
from unittest import mock
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
import main
from services import CounterOrderIds, TimestampOrderIds
from transactions import FileOrderLog, MemoryOrderLog
from view import ConsoleView


class ArgsTests(unittest.TestCase):
    def test_defaults(self):
        settings, report = main.parse_args([])
        self.assertEqual(settings.order_log_path, config.ORDER_LOG_PATH)
        self.assertIsNone(report)
        self.assertFalse(settings.verbose)

    def test_flags(self):
        settings, report = main.parse_args(
            ['--memory', '--order-ids', 'timestamp', '--order-log', 'x.log', '--report', 'r.png', '-v']
        )
        self.assertEqual(settings.order_backend, 'memory')
        self.assertEqual(settings.order_id_style, 'timestamp')
        self.assertEqual(settings.order_log_path, 'x.log')
        self.assertEqual(report, 'r.png')
        self.assertTrue(settings.verbose)

    def test_bad_settings_rejected(self):
        with self.assertRaises(ValueError):
            config.Settings(order_backend='sqlite')
        with self.assertRaises(ValueError):
            config.Settings(order_id_style='uuid')


class WiringTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.log_path = os.path.join(self.tmpdir, 'orders.log')

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_build_order_log(self):
        self.assertIsInstance(main.build_order_log(config.Settings(order_backend='memory')), MemoryOrderLog)
        log = main.build_order_log(config.Settings(order_backend='file', order_log_path=self.log_path))
        self.assertIsInstance(log, FileOrderLog)
        self.assertEqual(log.path, self.log_path)

    def test_counter_ids_resume_from_log(self):
        with open(self.log_path, 'w', encoding='utf-8') as fh:
            fh.write("[LOG] -> Order ID: 3 has been successfully checked out and paid using Cash.\n"
                     "4\tMouse\t19.99\t1\nTotal Amount: $19.99\n\n")
        settings = config.Settings(order_backend='file', order_log_path=self.log_path)
        ids = main.build_order_ids(settings, main.build_order_log(settings))
        self.assertIsInstance(ids, CounterOrderIds)
        self.assertEqual(ids.next_id(), '4')

    def test_timestamp_ids(self):
        settings = config.Settings(order_backend='memory', order_id_style='timestamp')
        self.assertIsInstance(main.build_order_ids(settings, MemoryOrderLog()), TimestampOrderIds)

    def test_full_session_writes_order_log(self):
        out, err = io.StringIO(), io.StringIO()
        settings = config.Settings(order_backend='file', order_log_path=self.log_path)
        lines = iter(['1', '3', 'Y', '3', 'N', '2', 'Y', '1', '3', '4'])
        c = main.build_controller(settings, view=ConsoleView(out=out, err=err), read_line=lambda: next(lines))
        self.assertEqual(c.run(), 0)
        with open(self.log_path, 'r', encoding='utf-8') as fh:
            text = fh.read()
        self.assertEqual(
            text,
            "[LOG] -> Order ID: 1 has been successfully checked out and paid using Cash.\n"
            "3\tHeadphones\t99.99\t2\n"
            "Total Amount: $199.98\n"
            "\n",
        )

    def test_receipts_written_when_configured(self):
        receipts_dir = os.path.join(self.tmpdir, 'receipts')
        settings = config.Settings(order_backend='memory', receipts_dir=receipts_dir)
        lines = iter(['1', '4', 'N', '2', 'Y', '3', '4'])
        c = main.build_controller(settings, view=ConsoleView(out=io.StringIO(), err=io.StringIO()),
                                  read_line=lambda: next(lines))
        c.run()
        self.assertTrue(os.path.exists(os.path.join(receipts_dir, '1.png')))


class MainTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_report_without_orders_fails(self):
        with mock.patch('sys.stderr', new_callable=io.StringIO) as err:
            code = main.main(['--order-log', os.path.join(self.tmpdir, 'none.log'),
                              '--report', os.path.join(self.tmpdir, 'r.png')])
        self.assertEqual(code, 1)
        self.assertIn('No orders found', err.getvalue())

    def test_report_from_log(self):
        log_path = os.path.join(self.tmpdir, 'orders.log')
        with open(log_path, 'w', encoding='utf-8') as fh:
            fh.write("[LOG] -> Order ID: 1 has been successfully checked out and paid using GCash.\n"
                     "1\tLaptop\t999.99\t1\nTotal Amount: $999.99\n\n")
        report = os.path.join(self.tmpdir, 'r.png')
        with mock.patch('sys.stdout', new_callable=io.StringIO):
            self.assertEqual(main.main(['--order-log', log_path, '--report', report]), 0)
        self.assertTrue(os.path.exists(report))


if __name__ == '__main__':
    unittest.main()
