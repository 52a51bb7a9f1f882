"""
Media storage domain exceptions.
"""

from vitrine.domain.exceptions.base import VitrineException


class MediaUploadError(VitrineException):
    """Raised when the object store rejects an upload or returns no URL."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Error while uploading {field}", code="UPLOAD_FAILED")
