# storage.py

from pathlib import Path
from typing import Iterable, List, Tuple
import os
import stat
import tempfile

from data import RESERVATIONS_DIR

SeatRecord = Tuple[str, int]  # e.g. ("A", 5)


class ReservationFileError(ValueError):
    """A reservations file holds a line that is not a "row,column" record."""

    def __init__(self, path: Path, line_no: int, line: str):
        self.path = path
        self.line_no = line_no
        self.line = line
        super().__init__(f"{path}:{line_no}: malformed seat record {line!r}")


def reservations_path(title: str, directory: Path = RESERVATIONS_DIR) -> Path:
    return Path(directory) / f"{title}.txt"


def parse_seat_record(line: str) -> SeatRecord:
    """Parses "B,12" into ("B", 12). Raises ValueError on anything else."""
    parts = line.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected 2 fields, got {len(parts)}")

    row = parts[0].strip().upper()
    if len(row) != 1 or not row.isalpha():
        raise ValueError(f"bad row {parts[0]!r}")

    column = int(parts[1].strip())
    return row, column


def format_seat_record(row: str, column: int) -> str:
    return f"{row},{column}\n"


def load_reserved_seats(path: Path) -> List[SeatRecord]:
    """
    Reads every record of a reservations file.
    Returns [] if the file does not exist; blank lines are skipped.
    Raises ReservationFileError on the first malformed or undecodable line,
    OSError if unreadable.
    """
    path = Path(path)
    if not path.exists():
        return []

    records: List[SeatRecord] = []
    with path.open("rb") as fh:
        for line_no, raw in enumerate(fh, start=1):
            try:
                line = raw.decode("utf-8").strip()
            except UnicodeDecodeError as e:
                raise ReservationFileError(path, line_no, repr(raw)) from e
            if not line:
                continue
            try:
                records.append(parse_seat_record(line))
            except ValueError as e:
                raise ReservationFileError(path, line_no, line) from e

    return records


def _new_file_mode(path: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new one."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_reserved_seats(path: Path, seats: Iterable[SeatRecord]) -> None:
    """
    Replaces the file with one record per seat.
    Writes to a temp file in the same directory, syncs it, and renames it over
    the target, so readers see either the old or the new contents.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            for row, column in seats:
                fh.write(format_seat_record(row, column))
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, _new_file_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
