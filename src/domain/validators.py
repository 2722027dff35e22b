"""
Local validators - Pure rules over raw field text.

No side effects and no failure modes. Message constants live here so the
aggregator and tests share the exact user-visible wording.
"""

MIN_USERNAME_LENGTH = 3

USERNAME_TOO_SHORT = "Username must be at least three characters!"
USERNAME_TAKEN = "This username is already taken."
USERNAME_CHECK_FAILED = "Error checking username availability: {error}"
PASSWORD_EMPTY = "Password must not be empty"
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"


def username_length_valid(username: str) -> bool:
    return len(username) >= MIN_USERNAME_LENGTH


def password_empty(password: str) -> bool:
    return password == ""


def password_matching(password: str, password_confirmation: str) -> bool:
    return password == password_confirmation


def password_valid(password: str, password_confirmation: str) -> bool:
    """Password is non-empty and equal to its confirmation."""
    return not password_empty(password) and password_matching(password, password_confirmation)
