"""
S3 media gateway.

Pushes staged uploads to an S3-compatible bucket (AWS, MinIO, R2 ...)
and removes the staged local copy after every attempt.
"""

import asyncio
import mimetypes
import os
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlparse
from uuid import uuid4

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from vitrine.domain.services.i_media_gateway import IMediaGateway
from vitrine.domain.value_objects.session import UploadedMedia
from vitrine.infrastructure.monitoring.logger import get_logger
from vitrine.infrastructure.monitoring.metrics import media_operations_total

logger = get_logger(__name__)


class S3MediaGateway(IMediaGateway):
    """
    Object store gateway backed by boto3.

    boto3 is blocking, so every call runs in a worker thread.
    Failures are logged and reported as None/False, never raised.
    """

    def __init__(
        self,
        bucket_name: str,
        region: str = "us-east-1",
        endpoint_url: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        public_base_url: Optional[str] = None,
        key_prefix: str = "media",
        client: Any = None,
    ):
        """
        Initialize gateway.

        Args:
            bucket_name: Target bucket
            region: Bucket region
            endpoint_url: Custom endpoint (MinIO, LocalStack, R2)
            access_key_id: Static credentials (omit to use the default chain)
            secret_access_key: Static credentials
            public_base_url: Base URL objects are served from
            key_prefix: Key prefix for every stored object
            client: Pre-built S3 client (tests)
        """
        self.bucket_name = bucket_name
        self.region = region
        self.endpoint_url = endpoint_url
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self.key_prefix = key_prefix.strip("/")
        self._client = client or self._create_s3_client(
            access_key_id, secret_access_key
        )

    def _create_s3_client(
        self, access_key_id: Optional[str], secret_access_key: Optional[str]
    ):
        """Create S3 client with configured credentials."""
        s3_config: dict[str, Any] = {"region_name": self.region}

        # Custom endpoint for MinIO/LocalStack
        if self.endpoint_url:
            s3_config["endpoint_url"] = self.endpoint_url

        if access_key_id and secret_access_key:
            s3_config["aws_access_key_id"] = access_key_id
            s3_config["aws_secret_access_key"] = secret_access_key

        return boto3.client("s3", **s3_config)

    def public_url(self, key: str) -> str:
        """Public URL an object key is served from."""
        if self.public_base_url:
            return f"{self.public_base_url}/{key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket_name}/{key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    def key_from_url(self, url_or_public_id: str) -> str:
        """
        Recover the object key from a public URL.

        Values without a scheme are taken to be keys already.
        """
        if "://" not in url_or_public_id:
            return url_or_public_id.lstrip("/")

        if self.public_base_url and url_or_public_id.startswith(
            self.public_base_url + "/"
        ):
            return url_or_public_id[len(self.public_base_url) + 1 :]

        path = urlparse(url_or_public_id).path.lstrip("/")
        # Path-style URLs carry the bucket as first segment
        bucket_prefix = f"{self.bucket_name}/"
        if path.startswith(bucket_prefix):
            path = path[len(bucket_prefix) :]
        return path

    def _new_key(self, local_path: str) -> str:
        suffix = Path(local_path).suffix.lower()
        name = f"{uuid4().hex}{suffix}"
        return f"{self.key_prefix}/{name}" if self.key_prefix else name

    async def upload(self, local_path: Optional[str]) -> Optional[UploadedMedia]:
        """
        Upload a staged local file.

        Args:
            local_path: Path of the staged file

        Returns:
            UploadedMedia on success, None if path is empty or upload failed
        """
        if not local_path:
            return None

        key = self._new_key(local_path)
        content_type = mimetypes.guess_type(local_path)[0] or "application/octet-stream"

        try:
            await asyncio.to_thread(
                self._client.upload_file,
                local_path,
                self.bucket_name,
                key,
                ExtraArgs={"ContentType": content_type},
            )
        except (BotoCoreError, ClientError, OSError) as e:
            logger.warning(
                "Media upload failed",
                extra={"key": key, "error_type": type(e).__name__},
            )
            media_operations_total.labels(operation="upload", outcome="failed").inc()
            return None
        finally:
            self._discard_local(local_path)

        media_operations_total.labels(operation="upload", outcome="success").inc()
        logger.info("Media uploaded", extra={"key": key})
        return UploadedMedia(url=self.public_url(key), public_id=key)

    async def delete(self, url_or_public_id: str) -> bool:
        """
        Delete a stored object.

        Args:
            url_or_public_id: Public URL or object key

        Returns:
            True if the object was deleted, False otherwise
        """
        if not url_or_public_id:
            return False

        key = self.key_from_url(url_or_public_id)
        if not key:
            return False

        try:
            await asyncio.to_thread(
                self._client.delete_object, Bucket=self.bucket_name, Key=key
            )
        except (BotoCoreError, ClientError) as e:
            logger.warning(
                "Media delete failed",
                extra={"key": key, "error_type": type(e).__name__},
            )
            media_operations_total.labels(operation="delete", outcome="failed").inc()
            return False

        media_operations_total.labels(operation="delete", outcome="success").inc()
        return True

    @staticmethod
    def _discard_local(local_path: str) -> None:
        try:
            os.remove(local_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(
                "Could not remove staged upload",
                extra={"path": local_path, "error_type": type(e).__name__},
            )
