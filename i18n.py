# i18n.py

from typing import Dict

LANG_EN: Dict[str, str] = {
    "welcome": "\nWelcome to the Movie Reservation System\n",
    "available_movies": "Available Movies:",
    "exit_option": "0. Exit",
    "choose_movie": "\nEnter the movie number (1-{count}) to reserve tickets or 0 to exit: ",
    "goodbye": "Thank you for using the Movie Reservation System. Goodbye!",
    "invalid_choice": "Invalid choice. Please try again.",

    "name_prompt": "Enter your name: ",
    "row_prompt": "Enter the row (A-{last_row}) for the seats: ",
    "start_prompt": "Enter the starting column (1-{columns}): ",
    "end_prompt": "Enter the ending column (1-{columns}): ",
    "invalid_number": "Columns must be whole numbers. Please try again.",

    "status_booked": "Successfully reserved seats {row}{start}-{end} for '{movie}'.",
    "total_amount": "Total Amount: {total}",
    "gst_amount": "GST ({rate}%): {gst:.2f}",
    "final_amount": "Final Amount (Including GST): {final:.2f}",
    "ticket_saved": "Ticket saved to {path}",
    "status_failed": (
        "Reservation failed. Some or all seats in the range "
        "{row}{start}-{end} are already reserved or invalid."
    ),
}

LANG_BG: Dict[str, str] = {
    "welcome": "\nДобре дошли в системата за резервации\n",
    "available_movies": "Филми:",
    "exit_option": "0. Изход",
    "choose_movie": "\nВъведи номер на филм (1-{count}) или 0 за изход: ",
    "goodbye": "Благодарим, довиждане!",
    "invalid_choice": "Невалиден избор. Опитай отново.",

    "name_prompt": "Име: ",
    "row_prompt": "Ред (A-{last_row}): ",
    "start_prompt": "Начална колона (1-{columns}): ",
    "end_prompt": "Крайна колона (1-{columns}): ",
    "invalid_number": "Колоните трябва да са цели числа. Опитай отново.",

    "status_booked": "Резервирани места {row}{start}-{end} за '{movie}'.",
    "total_amount": "Сума: {total}",
    "gst_amount": "ДДС ({rate}%): {gst:.2f}",
    "final_amount": "Общо (с ДДС): {final:.2f}",
    "ticket_saved": "Билетът е записан в {path}",
    "status_failed": (
        "Резервацията е неуспешна. Някои от местата "
        "{row}{start}-{end} са заети или невалидни."
    ),
}

LANGS = {
    "en": LANG_EN,
    "bg": LANG_BG,
}


def get_translations(lang_code: str) -> Dict[str, str]:
    return LANGS.get(lang_code, LANG_EN)
