"""Helper utilities."""

import re
import uuid
from pathlib import Path
from urllib.parse import urlparse

from app.utils.constants import DEFAULT_LINK_TYPE, LINK_TYPE_HOSTS


def detect_link_type(url: str) -> str:
    """Classify a job link by the site it points to."""
    host = (urlparse((url or "").strip()).hostname or "").lower()
    for link_type, domains in LINK_TYPE_HOSTS.items():
        if any(host == domain or host.endswith("." + domain) for domain in domains):
            return link_type
    return DEFAULT_LINK_TYPE


def sanitize_filename(filename: str) -> str:
    """Sanitize filename for storage."""
    # Remove special characters
    sanitized = re.sub(r'[^\w\s.-]', '', filename)
    # Replace spaces with underscores
    sanitized = re.sub(r'\s+', '_', sanitized)
    return sanitized[:255]  # Limit length


def unique_upload_name(field_name: str, original_filename: str) -> str:
    """Build a collision-free stored name that keeps the original extension."""
    extension = Path(sanitize_filename(original_filename)).suffix.lower()
    return f"{field_name}-{uuid.uuid4().hex}{extension}"
