# seat_grid.py

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from data import ROWS, NUM_COLUMNS, RESERVATIONS_DIR
from logger_config import logger
from storage import (
    ReservationFileError,
    SeatRecord,
    load_reserved_seats,
    reservations_path,
    save_reserved_seats,
)


@dataclass
class Seat:
    row: str
    column: int
    is_reserved: bool = False

    @property
    def label(self) -> str:
        return f"{self.row}{self.column}"


class ReservationGrid:
    """
    Seat map for one movie title:
    - fixed ROWS x NUM_COLUMNS seats, all created up front
    - all-or-nothing reservation of a column range on one row
    - persisted as "row,column" lines in <title>.txt
    """

    def __init__(self, title: str, price: int, storage_dir: Optional[Path] = None):
        self.title = title
        self.seat_price = price
        self.file_path = reservations_path(title, storage_dir or RESERVATIONS_DIR)
        self.seats: List[List[Seat]] = [
            [Seat(row, col + 1) for col in range(NUM_COLUMNS)] for row in ROWS
        ]

    # ---------- LOOKUP ----------

    def _row_index(self, row: str) -> int:
        """Index of a row letter, or -1 if it is not on the grid."""
        if not isinstance(row, str):
            return -1
        row = row.strip().upper()
        if len(row) != 1:
            return -1
        index = ord(row) - ord("A")
        return index if 0 <= index < len(ROWS) else -1

    def seat(self, row: str, column: int) -> Optional[Seat]:
        index = self._row_index(row)
        if index < 0 or not 1 <= column <= NUM_COLUMNS:
            return None
        return self.seats[index][column - 1]

    def is_reserved(self, row: str, column: int) -> bool:
        seat = self.seat(row, column)
        return seat is not None and seat.is_reserved

    def reserved_seats(self) -> List[SeatRecord]:
        """Reserved seats, row A before B, low column before high."""
        return [
            (seat.row, seat.column)
            for seat_row in self.seats
            for seat in seat_row
            if seat.is_reserved
        ]

    def available_count(self) -> int:
        return sum(
            1 for seat_row in self.seats for seat in seat_row if not seat.is_reserved
        )

    # ---------- RESERVATION ----------

    def reserve(self, row: str, start_column: int, end_column: int) -> Tuple[bool, str]:
        """
        Reserves seats start_column..end_column (inclusive) on one row.
        Nothing changes unless every seat in the range is free.
        Returns (success, reason).
        """
        index = self._row_index(row)
        if index < 0:
            return False, "invalid_row"
        if start_column < 1 or end_column > NUM_COLUMNS or start_column > end_column:
            return False, "invalid_range"

        in_range = self.seats[index][start_column - 1:end_column]
        if any(seat.is_reserved for seat in in_range):
            return False, "seat_taken"

        for seat in in_range:
            seat.is_reserved = True

        return True, "ok"

    # ---------- PERSISTENCE ----------

    def restore(self, source: Optional[Path] = None) -> int:
        """
        Marks the seats listed in the reservations file as reserved.
        An unreadable or malformed file counts as no prior reservations.
        Returns how many seats were marked.
        """
        path = Path(source) if source is not None else self.file_path

        try:
            records = load_reserved_seats(path)
        except (OSError, ReservationFileError) as e:
            logger.error(f"Error loading reserved seats for {self.title}: {e}")
            return 0

        if not records:
            logger.debug(f"No saved reservations for {self.title} at {path}")

        restored = 0
        for row, column in records:
            seat = self.seat(row, column)
            if seat is None:
                logger.warning(
                    f"Skipping out-of-range seat {row},{column} in {path}"
                )
                continue
            if not seat.is_reserved:
                seat.is_reserved = True
                restored += 1

        return restored

    def persist(self, sink: Optional[Path] = None) -> bool:
        """Writes the reserved seats, replacing earlier contents. False on I/O error."""
        path = Path(sink) if sink is not None else self.file_path

        try:
            save_reserved_seats(path, self.reserved_seats())
        except OSError as e:
            logger.error(f"Error saving reserved seats for {self.title}: {e}")
            return False

        return True

    # ---------- DISPLAY ----------

    def render(self) -> str:
        lines = [f"\nSeating Chart for {self.title}:"]

        header = "   " + "".join(f"{col:2d} " for col in range(1, NUM_COLUMNS + 1))
        lines.append(header)

        for seat_row, row in zip(self.seats, ROWS):
            cells = "".join(" X " if seat.is_reserved else " O " for seat in seat_row)
            lines.append(f"{row:>2s} {cells}")

        return "\n".join(lines)
