from datetime import datetime
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Tuple
import random
import string

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A6, landscape
from reportlab.pdfgen import canvas

from data import TICKETS_DIR
from pricing import PriceQuote


PALETTE = {
    "page": HexColor("#e5e7eb"),
    "card": HexColor("#ffffff"),
    "border": HexColor("#d1d5db"),
    "accent": HexColor("#2563eb"),
    "band": HexColor("#dbeafe"),
    "text": HexColor("#111827"),
    "muted": HexColor("#6b7280"),
}

CARD_MARGIN = 10
BAND_HEIGHT = 24
PADDING = 16


class TicketBox(NamedTuple):
    left: float
    right: float
    top: float
    bottom: float


def generate_booking_code() -> str:
    return "".join(random.choices(string.ascii_uppercase + string.digits, k=8))


def _draw_card(c: canvas.Canvas, width: float, height: float, booking_code: str) -> TicketBox:
    """Page background, rounded card and the title band. Returns the writable area."""
    c.setFillColor(PALETTE["page"])
    c.rect(0, 0, width, height, fill=1, stroke=0)

    card_w = width - 2 * CARD_MARGIN
    card_h = height - 2 * CARD_MARGIN
    c.setFillColor(PALETTE["card"])
    c.setStrokeColor(PALETTE["border"])
    c.setLineWidth(1)
    c.roundRect(CARD_MARGIN, CARD_MARGIN, card_w, card_h, 10, fill=1, stroke=1)

    band_y = height - CARD_MARGIN - BAND_HEIGHT
    c.setFillColor(PALETTE["band"])
    c.roundRect(CARD_MARGIN, band_y, card_w, BAND_HEIGHT, 10, fill=1, stroke=0)

    c.setFillColor(PALETTE["accent"])
    c.setFont("Helvetica-Bold", 11)
    c.drawString(CARD_MARGIN + PADDING, band_y + 7, "MOVIE TICKET")
    c.setFillColor(PALETTE["text"])
    c.setFont("Helvetica-Bold", 16)
    c.drawRightString(width - CARD_MARGIN - PADDING, band_y + 8, booking_code)

    return TicketBox(
        left=CARD_MARGIN + PADDING,
        right=width - CARD_MARGIN - PADDING,
        top=band_y - 14,
        bottom=CARD_MARGIN + 12,
    )


def _draw_fields(c: canvas.Canvas, box: TicketBox, fields: List[Tuple[str, str, bool]]) -> None:
    """Caption above value, one pair per field, top to bottom."""
    y = box.top
    for caption, value, bold in fields:
        c.setFillColor(PALETTE["muted"])
        c.setFont("Helvetica", 8)
        c.drawString(box.left, y, caption)
        c.setFillColor(PALETTE["text"])
        c.setFont("Helvetica-Bold" if bold else "Helvetica", 11)
        c.drawString(box.left, y - 13, value)
        y -= 31


def generate_ticket_pdf(
    booking_code: str,
    movie_title: str,
    seats: Iterable[str],
    quote: PriceQuote,
    tickets_dir: Optional[Path] = None,
) -> Path:
    """
    Draws an A6 landscape ticket for one reservation and returns its path.
    The patron's name is not printed, it is only kept for the session.
    """
    tickets_dir = Path(tickets_dir or TICKETS_DIR)
    tickets_dir.mkdir(parents=True, exist_ok=True)
    file_path = tickets_dir / f"{booking_code}.pdf"

    width, height = landscape(A6)
    c = canvas.Canvas(str(file_path), pagesize=(width, height))

    box = _draw_card(c, width, height, booking_code)
    _draw_fields(
        c,
        box,
        [
            ("Movie", movie_title[:40], True),
            ("Seats", ", ".join(seats)[:50], False),
            ("Amount", f"{quote.total}  +  GST {quote.gst:.2f}", False),
            ("Total paid", f"{quote.final:.2f}", True),
        ],
    )

    c.setFillColor(PALETTE["muted"])
    c.setFont("Helvetica", 7)
    c.drawString(box.left, box.bottom, f"Issued: {datetime.now():%Y-%m-%d %H:%M}")
    c.drawRightString(box.right, box.bottom, "Movie Reservation System")

    c.showPage()
    c.save()

    return file_path
