import re

from utils.constants import MIN_PASSWORD_LENGTH

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_login(username: str, password: str) -> str:
    """Return the cleaned username or raise ValueError."""
    username = (username or "").strip()
    if not username:
        raise ValueError("Username cannot be empty.")
    if not (password or "").strip():
        raise ValueError("Password cannot be empty.")
    return username


def validate_registration(
    username: str, email: str, password: str, confirm_password: str
) -> str:
    username = (username or "").strip()
    email = (email or "").strip()
    if not username:
        raise ValueError("Username cannot be empty.")
    if not _EMAIL_RE.match(email):
        raise ValueError(f"'{email}' is not a valid email address.")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    if password != confirm_password:
        raise ValueError("Passwords do not match.")
    return username
