"""Password generator entry point.

Interactive menu for generating passwords and testing their strength.
"""

from cli import generate_password_flow, test_password_flow
from core import configure_logging


def main_menu() -> None:
    """Main app menu and selection options."""
    while True:
        print("\n=== Password Generator Menu ===")
        print("1. Generate a password")
        print("2. Test a password")
        print("3. Exit")

        choice = input("Choose an option (1-3): ").strip()
        if choice == '1':
            generate_password_flow()
        elif choice == '2':
            test_password_flow()
        elif choice == '3':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 3.")


def main() -> None:
    configure_logging()
    main_menu()


if __name__ == "__main__":
    main()
