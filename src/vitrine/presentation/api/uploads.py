"""
Staging of multipart uploads on local disk.

Files are copied under UPLOAD_TEMP_DIR with a random name; the media
gateway removes each staged file once it has tried to push it. Routes
call discard_staged() afterwards for files the gateway never saw.
"""

import os
import shutil
from pathlib import Path
from typing import Optional
from uuid import uuid4

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from vitrine.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


def _copy_to_disk(upload: UploadFile, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    upload.file.seek(0)
    with open(target, "wb") as out:
        shutil.copyfileobj(upload.file, out)


async def stage_upload(upload: Optional[UploadFile], temp_dir: str) -> Optional[str]:
    """
    Copy an uploaded file to the staging directory.

    Args:
        upload: Multipart file (None or nameless means "not supplied")
        temp_dir: Staging directory

    Returns:
        Path of the staged copy, None if nothing was uploaded
    """
    if upload is None or not upload.filename:
        return None

    suffix = Path(upload.filename).suffix.lower()
    target = Path(temp_dir) / f"{uuid4().hex}{suffix}"
    await run_in_threadpool(_copy_to_disk, upload, target)
    return str(target)


def discard_staged(*paths: Optional[str]) -> None:
    """Remove staged files that are still on disk."""
    for path in paths:
        if not path:
            continue
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(
                "Could not remove staged upload",
                extra={"path": path, "error_type": type(e).__name__},
            )
