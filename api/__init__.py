"""REST API for password generation and strength checks."""
