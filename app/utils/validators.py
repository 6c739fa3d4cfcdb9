"""Validators."""

from typing import List

from email_validator import EmailNotValidError, validate_email


def validate_file_extension(filename: str, allowed_extensions: List[str]) -> bool:
    """Validate file extension."""
    if not filename or "." not in filename:
        return False

    extension = filename.rsplit('.', 1)[-1].lower()
    return extension in [ext.lower().lstrip('.') for ext in allowed_extensions]


def normalize_email(value: str) -> str:
    """
    Canonical form of an email address, the same one EmailStr stores.
    Input that does not parse as an address is returned unchanged.
    """
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        return value
