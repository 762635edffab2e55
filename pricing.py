# pricing.py

from dataclasses import dataclass

from data import GST_RATE


@dataclass(frozen=True)
class PriceQuote:
    seat_count: int
    total: int
    gst: float
    final: float


def quote_reservation(seat_count: int, seat_price: int, gst_rate: float = GST_RATE) -> PriceQuote:
    """Flat price per seat plus GST on the whole amount."""
    total = seat_count * seat_price
    gst = round(total * gst_rate, 2)
    return PriceQuote(
        seat_count=seat_count,
        total=total,
        gst=gst,
        final=round(total + gst, 2),
    )
