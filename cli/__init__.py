"""CLI package for the password generator.

Provides modular CLI flows for generating and testing passwords.
"""

from cli.generator import copy_to_clipboard, generate_password_flow
from cli.tester import test_password_flow

__all__ = [
    "copy_to_clipboard",
    "generate_password_flow",
    "test_password_flow",
]
