"""
Media gateway interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from vitrine.domain.value_objects.session import UploadedMedia


class IMediaGateway(ABC):
    """Interface for pushing local files to an external object store."""

    @abstractmethod
    async def upload(self, local_path: Optional[str]) -> Optional[UploadedMedia]:
        """
        Upload a staged local file.

        The local file is removed after the attempt, successful or not.

        Args:
            local_path: Path of the staged file

        Returns:
            UploadedMedia on success, None if path is empty or upload failed
        """

    @abstractmethod
    async def delete(self, url_or_public_id: str) -> bool:
        """
        Delete a stored object.

        Args:
            url_or_public_id: Public URL or object key

        Returns:
            True if the object was deleted, False otherwise
        """
