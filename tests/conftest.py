import pytest

from seat_grid import ReservationGrid


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "reservations"


@pytest.fixture
def grid(storage_dir):
    return ReservationGrid("Mufasa", 300, storage_dir)


@pytest.fixture
def fresh_grid(storage_dir):
    """A second grid for the same title, sharing the backing file."""

    def _make():
        return ReservationGrid("Mufasa", 300, storage_dir)

    return _make
