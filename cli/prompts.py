"""Shared CLI prompt utilities.

Common input prompts and validation used across CLI flows.
"""

from typing import Optional

from core import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH


CANCEL_WORDS = ('q', 'exit')


def ask_yes_no(question: str) -> Optional[bool]:
    """Ask a y/n question until answered.

    Returns:
        True for 'y', False for 'n', None to cancel
    """
    while True:
        ans = input(f"{question}? (y/n or q to cancel): ").strip().lower()
        if ans in CANCEL_WORDS:
            return None
        if ans in ['y', 'n']:
            return ans == 'y'
        print("Please enter 'y', 'n', or 'q' to cancel.")


def prompt_for_password_length() -> Optional[int]:
    """Prompt user for valid password length.

    Returns:
        Length as integer, or None to cancel
    """
    while True:
        val = input(
            f"Enter password length ({MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}, or 'q' to cancel): "
        ).strip().lower()

        if val in CANCEL_WORDS:
            return None

        try:
            length = int(val)
            if MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH:
                return length
            print(f"Please enter a number between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}.")
        except ValueError:
            print("Invalid input. Enter a number.")


def prompt_for_character_types() -> Optional[tuple[bool, bool, bool, bool]]:
    """Prompt user to choose character types for password generation.

    Returns:
        Tuple of (uppercase, lowercase, numbers, symbols) as booleans,
        or None to cancel
    """
    while True:
        answers = []
        for part in ("uppercase letters", "lowercase letters", "numbers", "special characters"):
            ans = ask_yes_no(f"Include {part}")
            if ans is None:
                return None
            answers.append(ans)

        if any(answers):
            upper, lower, numbers, symbols = answers
            return upper, lower, numbers, symbols

        print("At least one character type must be selected.\n")


def prompt_for_exclusions() -> Optional[tuple[bool, bool]]:
    """Prompt user for the similar/ambiguous character exclusions.

    Returns:
        Tuple of (exclude_similar, exclude_ambiguous), or None to cancel
    """
    similar = ask_yes_no("Exclude similar characters (0/O, 1/l/I)")
    if similar is None:
        return None

    ambiguous = ask_yes_no("Exclude ambiguous symbols ([ ] { } | < > / ~ `)")
    if ambiguous is None:
        return None

    return similar, ambiguous
