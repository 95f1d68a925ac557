import os
from datetime import datetime

import qrcode
from PIL import Image, ImageDraw, ImageFont

STORE_NAME = "Online Store"


class ReceiptGenerator:
    def __init__(self, receipts_dir):
        self.receipts_dir = str(receipts_dir)

    @staticmethod
    def _load_font(size):
        # Try common system fonts, fallback to default
        candidates = ["arial.ttf", "DejaVuSans.ttf", "LiberationSans-Regular.ttf"]
        for f in candidates:
            try:
                return ImageFont.truetype(f, size)
            except OSError:
                continue
        return ImageFont.load_default()

    @staticmethod
    def _text_size(draw, text, font):
        bbox = draw.textbbox((0, 0), text, font=font)
        return (bbox[2] - bbox[0], bbox[3] - bbox[1])

    def _qr_image(self, order_id, size):
        qr = qrcode.QRCode(box_size=4, border=2)
        qr.add_data(order_id)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
        return img.resize((size, size), Image.NEAREST)

    def generate(self, order, printed_at=None):
        """Write a PNG receipt for ``order`` and return its path."""
        os.makedirs(self.receipts_dir, exist_ok=True)
        png_path = os.path.join(self.receipts_dir, f"{order.order_id}.png")
        printed_at = printed_at or datetime.now()
        items = order.items

        width = 640
        header_h = 170
        line_h = 24
        footer_h = 110
        height = header_h + max(80, len(items) * line_h + 20) + footer_h

        img = Image.new("RGB", (width, height), color=(255, 255, 255))
        draw = ImageDraw.Draw(img)

        f_head = self._load_font(26)
        f_body = self._load_font(14)
        f_mono = self._load_font(12)

        x = 30
        y = 24
        draw.text((x, y), STORE_NAME, font=f_head, fill=(20, 20, 20))
        y += 40
        draw.text((x, y), f"Order ID: {order.order_id}", font=f_body, fill=(0, 0, 0))
        y += 20
        draw.text((x, y), f"Date: {printed_at:%Y-%m-%d %H:%M:%S}", font=f_body, fill=(0, 0, 0))

        qr_size = 120
        img.paste(self._qr_image(order.order_id, qr_size), (width - qr_size - 20, 20))

        # Columns: right edges for amounts
        right = width - x
        col_total = right
        col_price = right - 110
        col_qty = col_price - 90

        y = header_h - 24
        draw.line((x, y - 6, right, y - 6), fill=(200, 200, 200), width=1)
        draw.text((x, y), "Item", font=f_mono, fill=(0, 0, 0))
        for label, edge in (("Qty", col_qty), ("Price", col_price), ("Total", col_total)):
            tw, _ = self._text_size(draw, label, f_mono)
            draw.text((edge - tw, y), label, font=f_mono, fill=(0, 0, 0))
        y += 20
        draw.line((x, y, right, y), fill=(230, 230, 230), width=1)
        y += 6

        for item in items:
            draw.text((x, y), item.product.name, font=f_mono, fill=(20, 20, 20))
            cells = (
                (str(item.qty), col_qty),
                (f"{item.product.price:,.2f}", col_price),
                (f"{item.total:,.2f}", col_total),
            )
            for text, edge in cells:
                tw, _ = self._text_size(draw, text, f_mono)
                draw.text((edge - tw, y), text, font=f_mono, fill=(20, 20, 20))
            y += line_h

        y = height - footer_h + 10
        draw.line((x, y - 8, right, y - 8), fill=(200, 200, 200), width=1)
        total_txt = f"Total: $ {order.total:,.2f}"
        tw, _ = self._text_size(draw, total_txt, f_body)
        draw.text((col_total - tw, y), total_txt, font=f_body, fill=(0, 100, 0))
        y += line_h
        draw.text((x, y), f"Payment: {order.payment_method}", font=f_body, fill=(0, 0, 0))
        y += line_h + 6
        draw.text((x, y), "Thank you for shopping with us!", font=f_body, fill=(80, 80, 80))

        img.save(png_path)
        return png_path
