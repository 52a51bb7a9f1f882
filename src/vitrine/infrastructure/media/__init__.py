"""
Media storage infrastructure.
"""

from vitrine.infrastructure.media.s3_media_gateway import S3MediaGateway

__all__ = ["S3MediaGateway"]
