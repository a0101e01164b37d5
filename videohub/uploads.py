import logging
import os
import re
import shutil
from typing import BinaryIO, Optional

from .errors import ValidationError

logger = logging.getLogger(__name__)

IMAGE_EXT_RE = re.compile(r"\.(jpg|jpeg|png|svg|bmp|tiff|webp|eps|gif)$", re.IGNORECASE)
STORED_IMAGE_RE = re.compile(r"^image(\d+)\.[^.]+$")


def is_image_filename(filename: Optional[str]) -> bool:
    return bool(filename) and IMAGE_EXT_RE.search(filename) is not None


def next_image_name(images_dir: str, ext: str) -> str:
    """imageN.ext where N is one past the highest index already on disk.

    Two uploads racing between the scan and the write can pick the same N.
    """
    highest = -1
    if os.path.isdir(images_dir):
        for name in os.listdir(images_dir):
            m = STORED_IMAGE_RE.match(name)
            if m:
                highest = max(highest, int(m.group(1)))
    return f"image{highest + 1}{ext.lower()}"


def save_poster(images_dir: str, filename: Optional[str], fileobj: BinaryIO) -> str:
    """Store an uploaded poster and return its public path ("/imageN.ext")."""
    if not filename:
        raise ValidationError("No file uploaded")
    if not is_image_filename(filename):
        raise ValidationError("Only image files are allowed!")

    os.makedirs(images_dir, exist_ok=True)
    ext = os.path.splitext(filename)[1]
    stored = next_image_name(images_dir, ext)
    target = os.path.join(images_dir, stored)
    with open(target, "wb") as out:
        shutil.copyfileobj(fileobj, out, 1024 * 1024)
    logger.info("Stored poster %s as %s", filename, target)
    return "/" + stored
