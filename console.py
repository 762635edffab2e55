# console.py

from pathlib import Path
from typing import Dict, Optional

from data import (
    GST_RATE,
    LANGUAGE,
    NUM_COLUMNS,
    ROWS,
    get_movie_price,
    get_movie_titles,
)
from i18n import get_translations
from logger_config import logger
from pricing import quote_reservation
from seat_grid import ReservationGrid
from ticket_pdf import generate_booking_code, generate_ticket_pdf


def load_grids(storage_dir: Optional[Path] = None) -> Dict[str, ReservationGrid]:
    """Builds one grid per configured title and restores its saved seats."""
    grids: Dict[str, ReservationGrid] = {}
    for title in get_movie_titles():
        grid = ReservationGrid(title, get_movie_price(title), storage_dir)
        grid.restore()
        grids[title] = grid
    return grids


class ReservationConsole:
    def __init__(
        self,
        grids: Dict[str, ReservationGrid],
        lang: str = LANGUAGE,
        tickets_dir: Optional[Path] = None,
    ):
        self.grids = grids
        self.titles = list(grids.keys())
        self.translations = get_translations(lang)
        self.tickets_dir = tickets_dir

    def _t(self, key: str, **kwargs) -> str:
        text = self.translations[key]
        return text.format(**kwargs) if kwargs else text

    def run(self) -> None:
        while True:
            try:
                grid = self._choose_movie()
            except (EOFError, KeyboardInterrupt):
                grid = None

            if grid is None:
                print(self._t("goodbye"))
                break
            if grid is False:
                continue

            try:
                self._handle_booking(grid)
            except (EOFError, KeyboardInterrupt):
                print()
                print(self._t("goodbye"))
                break

    # ---------- MENU ----------

    def _choose_movie(self):
        """Returns the chosen grid, None to exit, False on an invalid choice."""
        print(self._t("welcome"))
        print(self._t("available_movies"))
        for number, title in enumerate(self.titles, start=1):
            print(f"{number}. {title}")
        print(self._t("exit_option"))

        choice = input(self._t("choose_movie", count=len(self.titles))).strip()
        try:
            number = int(choice)
        except ValueError:
            print(self._t("invalid_choice"))
            return False

        if number == 0:
            return None
        if not 1 <= number <= len(self.titles):
            print(self._t("invalid_choice"))
            return False

        return self.grids[self.titles[number - 1]]

    # ---------- BOOKING ----------

    def _handle_booking(self, grid: ReservationGrid) -> None:
        print(grid.render())

        # patron name is asked for but never stored
        input(self._t("name_prompt"))

        row = input(self._t("row_prompt", last_row=ROWS[-1])).strip().upper()
        try:
            start_column = int(input(self._t("start_prompt", columns=NUM_COLUMNS)))
            end_column = int(input(self._t("end_prompt", columns=NUM_COLUMNS)))
        except ValueError:
            print(self._t("invalid_number"))
            return

        ok, reason = grid.reserve(row, start_column, end_column)
        if not ok:
            logger.info(
                f"Reservation {row}{start_column}-{end_column} for {grid.title} "
                f"rejected: {reason}"
            )
            print(self._t("status_failed", row=row, start=start_column, end=end_column))
            return

        quote = quote_reservation(end_column - start_column + 1, grid.seat_price)

        print(self._t("status_booked", row=row, start=start_column, end=end_column, movie=grid.title))
        print(self._t("total_amount", total=quote.total))
        print(self._t("gst_amount", rate=round(GST_RATE * 100), gst=quote.gst))
        print(self._t("final_amount", final=quote.final))

        grid.persist()

        seats = [f"{row}{col}" for col in range(start_column, end_column + 1)]
        try:
            path = generate_ticket_pdf(
                generate_booking_code(),
                grid.title,
                seats,
                quote,
                tickets_dir=self.tickets_dir,
            )
        except OSError as e:
            logger.error(f"Could not write ticket for {grid.title}: {e}")
            return
        print(self._t("ticket_saved", path=path))


def main() -> None:
    ReservationConsole(load_grids()).run()


if __name__ == "__main__":
    main()
