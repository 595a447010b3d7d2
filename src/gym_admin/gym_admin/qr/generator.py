from __future__ import annotations

import io
from urllib.parse import urlencode

import qrcode
from PIL import Image

QR_SIZE_PX = 300
QR_FILL = "#dc2626"
QR_BACK = "#ffffff"


def member_checkin_url(base_url: str, member_id: int) -> str:
    """The URL encoded in a member card; scanning it hits the check-in endpoint."""
    return f"{base_url.rstrip('/')}/api/check-in?{urlencode({'memberId': member_id})}"


def staff_checkin_url(base_url: str, staff_id: int) -> str:
    return f"{base_url.rstrip('/')}/api/staff-check-in?{urlencode({'staffId': staff_id})}"


def render_qr_png(data: str, *, size: int = QR_SIZE_PX) -> bytes:
    if not data:
        raise ValueError("QR payload must not be empty")

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color=QR_FILL, back_color=QR_BACK).get_image()
    img = img.convert("RGB").resize((size, size), Image.NEAREST)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
