"""Password generation CLI flows.

Handles password generation, preview and strength analysis.
Implements secure password display to prevent history leakage.
"""

import subprocess
import sys

import pyperclip

from core import ConfigurationError, GenerationConfig, StrengthReport, generate_password
from core.events import logger
from password_checker import label_for_level, score_strength

from cli.prompts import (
    prompt_for_character_types,
    prompt_for_exclusions,
    prompt_for_password_length,
)


CLIPBOARD_TIMEOUT = 5  # seconds


def _clipboard_commands() -> list[list[str]]:
    """Platform clipboard commands to try when pyperclip has no backend."""
    if sys.platform == "win32":
        return [["clip"]]
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if sys.platform.startswith("linux"):
        return [
            ["wl-copy"],
            ["xclip", "-selection", "clipboard"],
            ["xsel", "--clipboard", "--input"],
        ]
    return []


def copy_to_clipboard(text: str) -> bool:
    """Attempt to copy text to clipboard.

    Uses pyperclip, falling back to the platform clipboard command when
    pyperclip cannot find a backend.

    Args:
        text: Text to copy to clipboard

    Returns:
        True if successfully copied, False otherwise
    """
    try:
        pyperclip.copy(text)
        return True
    except (pyperclip.PyperclipException, UnicodeEncodeError) as e:
        logger.debug("pyperclip unavailable: %s", e)

    try:
        data = text.encode('utf-8')
    except UnicodeEncodeError as e:
        logger.debug("Cannot encode text for clipboard: %s", e)
        return False

    for command in _clipboard_commands():
        try:
            result = subprocess.run(
                command,
                input=data,
                capture_output=True,
                timeout=CLIPBOARD_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Clipboard command %s failed: %s", command[0], e)
            continue
        if result.returncode == 0:
            return True

    return False


def mask_password(password: str, show_chars: int = 4) -> str:
    """Create a masked version of password showing only first/last chars.

    Args:
        password: Password to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked password string like "Ab12****xy9!"
    """
    if len(password) <= show_chars * 2:
        return "*" * len(password)

    return password[:show_chars] + "*" * (len(password) - show_chars * 2) + password[-show_chars:]


def print_report(report: StrengthReport) -> None:
    """Print score, level label and suggestions."""
    print(f"Password Strength: {label_for_level(report.level)} ({report.score}/100)")
    print(f"Estimated entropy: {report.entropy_bits:.1f} bits")

    if report.feedback:
        print("Suggestions:")
        for tip in report.feedback:
            print(f"  - {tip}")


def preview_and_analyze(password: str, secure_display: bool = True) -> StrengthReport:
    """Display password securely and analyze its strength.

    By default, copies password to clipboard instead of displaying in terminal
    to prevent exposure in shell history. Falls back to masked display if
    clipboard is unavailable.

    Args:
        password: Password to analyze
        secure_display: If True, use clipboard/masked display (default: True)

    Returns:
        StrengthReport for the password
    """
    if secure_display:
        if copy_to_clipboard(password):
            print("\n[PASSWORD COPIED TO CLIPBOARD]")
            print(f"Preview (masked): {mask_password(password)}")
            print("(Password has been copied to your clipboard - paste where needed)")
        else:
            print(f"\nGenerated Password (masked): {mask_password(password)}")
            reveal = input("Show full password? (y/n - WARNING: visible in terminal history): ").strip().lower()
            if reveal == 'y':
                print(f"Full Password: {password}")
                print("WARNING: This password is now in your terminal history!")
    else:
        print(f"\nGenerated Password: {password}")

    report = score_strength(password)
    print_report(report)
    return report


def generate_password_flow() -> None:
    """Full interactive flow for generating a password."""
    print("\n--- Password Generation ---")

    length = prompt_for_password_length()
    if length is None:
        print("Canceled password generation.")
        return

    char_types = prompt_for_character_types()
    if char_types is None:
        print("Canceled password generation.")
        return

    exclusions = prompt_for_exclusions()
    if exclusions is None:
        print("Canceled password generation.")
        return

    upper, lower, numbers, symbols = char_types
    exclude_similar, exclude_ambiguous = exclusions
    config = GenerationConfig(
        length=length,
        include_uppercase=upper,
        include_lowercase=lower,
        include_numbers=numbers,
        include_symbols=symbols,
        exclude_similar=exclude_similar,
        exclude_ambiguous=exclude_ambiguous,
    )

    try:
        password = generate_password(config)
    except ConfigurationError as e:
        print(f"Cannot generate password: {e}")
        return

    preview_and_analyze(password)
