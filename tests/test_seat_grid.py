"""Unit tests for ReservationGrid."""

import pytest

from data import NUM_COLUMNS, ROWS
from seat_grid import ReservationGrid, Seat


def snapshot(grid):
    return [[seat.is_reserved for seat in row] for row in grid.seats]


class TestConstruction:
    def test_grid_is_26_by_32_and_free(self, grid):
        assert len(grid.seats) == 26
        assert all(len(row) == 32 for row in grid.seats)
        assert grid.available_count() == 26 * 32
        assert grid.reserved_seats() == []

    def test_seats_are_labelled_by_row_letter_and_column(self, grid):
        assert grid.seats[0][0] == Seat("A", 1)
        assert grid.seats[25][31].label == "Z32"
        assert grid.seats[1][4].label == "B5"

    def test_file_is_named_after_title(self, grid, storage_dir):
        assert grid.file_path == storage_dir / "Mufasa.txt"
        assert grid.seat_price == 300


class TestReserve:
    def test_reserves_whole_range(self, grid):
        ok, reason = grid.reserve("B", 3, 5)

        assert (ok, reason) == (True, "ok")
        assert grid.reserved_seats() == [("B", 3), ("B", 4), ("B", 5)]

    def test_seats_outside_range_untouched(self, grid):
        before = snapshot(grid)
        grid.reserve("C", 10, 12)
        after = snapshot(grid)

        changed = [
            (r, c)
            for r in range(len(ROWS))
            for c in range(NUM_COLUMNS)
            if before[r][c] != after[r][c]
        ]
        assert changed == [(2, 9), (2, 10), (2, 11)]

    def test_single_seat_and_full_row(self, grid):
        assert grid.reserve("A", 1, 1) == (True, "ok")
        assert grid.reserve("Z", 1, 32) == (True, "ok")
        assert grid.available_count() == 26 * 32 - 33

    def test_lowercase_row_accepted(self, grid):
        assert grid.reserve("d", 2, 2) == (True, "ok")
        assert grid.is_reserved("D", 2)

    @pytest.mark.parametrize(
        "row, start, end, reason",
        [
            ("", 1, 2, "invalid_row"),
            ("AA", 1, 2, "invalid_row"),
            ("1", 1, 2, "invalid_row"),
            ("@", 1, 2, "invalid_row"),
            ("B", 0, 2, "invalid_range"),
            ("B", 1, 33, "invalid_range"),
            ("B", 6, 5, "invalid_range"),
        ],
    )
    def test_invalid_input_fails_without_mutation(self, grid, row, start, end, reason):
        grid.reserve("B", 10, 11)
        before = snapshot(grid)

        assert grid.reserve(row, start, end) == (False, reason)
        assert snapshot(grid) == before

    def test_overlap_is_all_or_nothing(self, grid):
        grid.reserve("B", 3, 5)
        before = snapshot(grid)

        assert grid.reserve("B", 4, 6) == (False, "seat_taken")
        assert snapshot(grid) == before
        assert not grid.is_reserved("B", 6)

    def test_conflict_at_range_end_leaves_start_free(self, grid):
        grid.reserve("E", 20, 20)

        assert grid.reserve("E", 15, 20) == (False, "seat_taken")
        assert grid.reserved_seats() == [("E", 20)]

    def test_same_columns_other_row_still_free(self, grid):
        grid.reserve("B", 3, 5)

        assert grid.reserve("C", 3, 5) == (True, "ok")


class TestLookup:
    def test_seat_out_of_range_is_none(self, grid):
        assert grid.seat("A", 0) is None
        assert grid.seat("A", 33) is None
        assert grid.seat("?", 1) is None
        assert grid.is_reserved("?", 1) is False


class TestRender:
    def test_layout(self, grid):
        grid.reserve("B", 3, 5)
        lines = grid.render().split("\n")

        assert lines[0] == ""
        assert lines[1] == "Seating Chart for Mufasa:"
        assert lines[2] == "   " + "".join(f"{col:2d} " for col in range(1, 33))
        assert len(lines) == 3 + 26
        assert lines[3] == " A " + " O " * 32
        assert lines[4] == " B " + " O " * 2 + " X " * 3 + " O " * 27
        assert lines[-1].startswith(" Z ")

    def test_render_is_idempotent(self, grid):
        grid.reserve("K", 1, 8)

        assert grid.render() == grid.render()
        assert grid.reserved_seats() == [("K", col) for col in range(1, 9)]


class TestMufasaScenario:
    def test_book_then_overlap(self, grid):
        assert grid.reserve("B", 3, 5) == (True, "ok")
        after_first = snapshot(grid)

        assert grid.reserve("B", 4, 6)[0] is False
        assert snapshot(grid) == after_first


def test_each_title_has_its_own_grid(storage_dir):
    mufasa = ReservationGrid("Mufasa", 300, storage_dir)
    ganguva = ReservationGrid("Ganguva", 200, storage_dir)

    mufasa.reserve("A", 1, 4)

    assert ganguva.reserved_seats() == []
    assert mufasa.file_path != ganguva.file_path
