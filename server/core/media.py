# server/core/media.py

import os
import uuid
import shutil
import logging
from pathlib import Path
from fastapi import UploadFile
from core.exceptions import ValidationError


logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}

USER_FOLDER = "users"
POST_FOLDER = "posts"


class MediaStore:
    """
    Writes uploaded images below ``root`` and hands back the URL
    they are served from.
    """

    def __init__(self, root: str | Path, base_url: str):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def ensure_root(self):
        os.makedirs(self.root, exist_ok=True)

    def check(self, upload: UploadFile | None) -> str | None:
        """
        Returns the lower-cased extension of an upload, None when nothing was sent.
        Raises ValidationError for anything that is not an allowed image type.
        """
        if upload is None or not upload.filename:
            return None
        suffix = Path(upload.filename).suffix.lower()
        if suffix not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                f"Unsupported image type. Allowed: {', '.join(sorted(ext.lstrip('.') for ext in ALLOWED_EXTENSIONS))}"
            )
        return suffix

    def save(self, upload: UploadFile, folder: str) -> str:
        suffix = self.check(upload)
        if suffix is None:
            raise ValidationError("An image file is required.")

        save_dir = self.root / folder
        os.makedirs(save_dir, exist_ok=True)
        name = f"{uuid.uuid4().hex}{suffix}"
        path = save_dir / name
        with path.open("wb") as buffer:
            shutil.copyfileobj(upload.file, buffer)

        logger.info("Stored upload %s as %s", upload.filename, path)
        return f"{self.base_url}/{folder}/{name}"

    def save_optional(self, upload: UploadFile | None, folder: str) -> str | None:
        if upload is None or not upload.filename:
            return None
        return self.save(upload, folder)
