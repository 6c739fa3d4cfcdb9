"""Local filesystem storage for uploaded résumés and photos."""

from pathlib import Path
from typing import List

import structlog
from fastapi import UploadFile

from app.config import Settings
from app.core.exceptions import ValidationError
from app.utils.helpers import unique_upload_name
from app.utils.validators import validate_file_extension

logger = structlog.get_logger(__name__)

UPLOAD_URL_PREFIX = "/uploads"


class UploadStorage:
    """Stores files under UPLOAD_DIR and hands back the URL they are served from."""

    def __init__(self, settings: Settings):
        self.root = Path(settings.UPLOAD_DIR)
        self.max_size = settings.MAX_UPLOAD_SIZE

    async def save(self, file: UploadFile, field_name: str, allowed_extensions: List[str]) -> str:
        if not file.filename:
            raise ValidationError("No file uploaded")

        if not validate_file_extension(file.filename, allowed_extensions):
            allowed = ", ".join(f".{ext}" for ext in allowed_extensions)
            raise ValidationError(f"Only {allowed} files are allowed")

        # Read one byte past the limit to detect oversize files without buffering them whole
        content = await file.read(self.max_size + 1)
        if not content:
            raise ValidationError("No file uploaded")
        if len(content) > self.max_size:
            raise ValidationError(
                f"File too large. Maximum size: {self.max_size // (1024 * 1024)}MB"
            )

        stored_name = unique_upload_name(field_name, file.filename)
        self.root.mkdir(parents=True, exist_ok=True)
        with open(self.root / stored_name, "wb") as f:
            f.write(content)

        logger.info("file_uploaded", field=field_name, stored_name=stored_name, size=len(content))
        return f"{UPLOAD_URL_PREFIX}/{stored_name}"
