"""Password testing CLI flows.

Allows users to test the strength of their own password.
"""

from cli.generator import print_report
from password_checker import score_strength


def test_password_flow() -> None:
    """Allow user to test a password's strength."""
    print("\n--- Test a Password ---")

    # scored exactly as typed; spaces count as symbols
    user_pwd = input("Enter the password you want to test: ")
    if not user_pwd:
        print("No password entered.")
        return

    print_report(score_strength(user_pwd))
