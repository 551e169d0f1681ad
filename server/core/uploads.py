# server/core/uploads.py

import os
import re
import time
import shutil
import logging
import tempfile
from pathlib import Path
from fastapi import UploadFile

from core.config import Config
from core.errors import FileTooLarge, InvalidFileType


logger = logging.getLogger(__name__)

IMAGES_DIR = Config.IMAGES_DIR
MAX_IMAGE_SIZE = Config.MAX_IMAGE_SIZE

# Only .jpg is accepted; .jpeg and .png are rejected as well.
EXTENSION_PATTERN = re.compile(r"^\.jpg$")
# Checked against the declared content type, the bytes are not inspected.
MIME_PATTERN = re.compile(r"^image/jpe?g$")

CHUNK_SIZE = 1024 * 1024


def check_image(filename: str | None, content_type: str | None) -> str:
    """
    Validates the name and declared type of an upload.
    Returns the lowercased extension to keep on the stored file.
    """
    extension = Path(filename or "").suffix.lower()
    if not EXTENSION_PATTERN.match(extension) or not MIME_PATTERN.match(content_type or ""):
        raise InvalidFileType("Error: Images only!")
    return extension


def unique_filename(directory: Path, extension: str) -> str:
    """
    Claims a timestamp-based name in `directory` by creating an empty file
    under it. Concurrent callers landing on the same millisecond are bumped
    to the next free stamp.
    """
    stamp = int(time.time() * 1000)
    while True:
        filename = f"{stamp}{extension}"
        try:
            fd = os.open(directory / filename, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
        except FileExistsError:
            stamp += 1
            continue
        os.close(fd)
        return filename


def image_path_for(url: str, images_dir: Path | None = None) -> Path:
    """Maps a stored public path (/images/<name>) back to the file on disk."""
    prefix = f"{Config.IMAGES_URL_PREFIX}/"
    if not url or not url.startswith(prefix):
        raise ValueError(f"Not an image path: {url!r}")
    return Path(images_dir or IMAGES_DIR) / Path(url[len(prefix):]).name


def _spool(source, limit: int) -> Path:
    """
    Copies `source` into a temporary file, aborting once more than `limit`
    bytes have been read. The temporary file is removed on failure.
    """
    size = 0
    with tempfile.NamedTemporaryFile(delete=False) as tmp:
        tmp_path = Path(tmp.name)
        try:
            while chunk := source.read(CHUNK_SIZE):
                size += len(chunk)
                if size > limit:
                    raise FileTooLarge("File size too large")
                tmp.write(chunk)
        except BaseException:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise
    return tmp_path


def save_image(upload: UploadFile | None, images_dir: Path | None = None,
               max_size: int | None = None) -> str | None:
    """
    Stores a single uploaded image and returns its public path (/images/<name>).

    Returns None when the request carried no file. Nothing is written to
    `images_dir` unless the upload passes every check.
    """
    if upload is None or not upload.filename:
        return None

    images_dir = Path(images_dir or IMAGES_DIR)
    max_size = max_size if max_size is not None else MAX_IMAGE_SIZE

    try:
        extension = check_image(upload.filename, upload.content_type)
        tmp_path = _spool(upload.file, max_size)
    except (InvalidFileType, FileTooLarge) as e:
        logger.warning("Rejected upload %r (%s): %s", upload.filename, upload.content_type, e.message)
        raise

    images_dir.mkdir(parents=True, exist_ok=True)
    filename = unique_filename(images_dir, extension)
    # overwrites the empty file claimed above
    shutil.move(str(tmp_path), images_dir / filename)
    os.chmod(images_dir / filename, 0o644)
    logger.info("Stored upload %r as %s", upload.filename, filename)

    return f"{Config.IMAGES_URL_PREFIX}/{filename}"
