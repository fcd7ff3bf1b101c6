"""
S3 storage backend.

Thin boto3 wrapper used by media post-processing and event cleanup.
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError
from botocore.exceptions import NoCredentialsError
from django.conf import settings

from apps.shared.exceptions.exception import StorageServiceError
from apps.shared.storage.base import AbstractStorageService

logger = logging.getLogger(__name__)


class S3ConfigurationManager:
    """Manages S3 configuration and validation."""

    REQUIRED_SETTINGS = ('AWS_ACCESS_KEY_ID', 'AWS_SECRET_ACCESS_KEY', 'AWS_S3_REGION_NAME', 'S3_BUCKET_NAME')

    @classmethod
    def validate_configuration(cls) -> None:
        missing_settings = [name for name in cls.REQUIRED_SETTINGS if not getattr(settings, name, None)]
        if missing_settings:
            raise StorageServiceError(f"Missing required S3 settings: {', '.join(missing_settings)}")

    @classmethod
    def create_s3_client(cls):
        """Create and configure S3 client."""
        cls.validate_configuration()

        try:
            return boto3.client(
                's3',
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=settings.AWS_S3_REGION_NAME,
            )
        except (NoCredentialsError, BotoCoreError) as e:
            logger.error(f'Failed to create S3 client: {e}')
            raise StorageServiceError(f'S3 client creation failed: {e}')


class S3StorageService(AbstractStorageService):
    """boto3 implementation of the storage interface."""

    def __init__(self, s3_client=None, bucket_name: str | None = None):
        # Dependency injection for testing
        self.s3_client = s3_client or S3ConfigurationManager.create_s3_client()
        self.bucket_name = bucket_name or getattr(settings, 'S3_BUCKET_NAME', '')

    def _bucket(self, bucket: str | None) -> str:
        return bucket or self.bucket_name

    def download_file(self, key: str, local_path: str, bucket: str | None = None) -> None:
        try:
            self.s3_client.download_file(self._bucket(bucket), key, local_path)
            logger.debug(f'Downloaded s3://{self._bucket(bucket)}/{key} to {local_path}')
        except (ClientError, BotoCoreError) as e:
            logger.error(f'Error downloading {key}: {e}')
            raise StorageServiceError(f'Error downloading object {key}: {e}')

    def upload_file(
        self, local_path: str, key: str, content_type: str | None = None, bucket: str | None = None
    ) -> None:
        extra_args = {'ContentType': content_type} if content_type else None
        try:
            self.s3_client.upload_file(local_path, self._bucket(bucket), key, ExtraArgs=extra_args)
            logger.debug(f'Uploaded {local_path} to s3://{self._bucket(bucket)}/{key}')
        except (ClientError, BotoCoreError) as e:
            logger.error(f'Error uploading {key}: {e}')
            raise StorageServiceError(f'Error uploading object {key}: {e}')

    def delete_file(self, key: str, bucket: str | None = None) -> None:
        try:
            self.s3_client.delete_object(Bucket=self._bucket(bucket), Key=key)
            logger.debug(f'Deleted s3://{self._bucket(bucket)}/{key}')
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') in ('404', 'NoSuchKey'):
                return
            logger.error(f'Error deleting {key}: {e}')
            raise StorageServiceError(f'Error deleting object {key}: {e}')
        except BotoCoreError as e:
            logger.error(f'Error deleting {key}: {e}')
            raise StorageServiceError(f'Error deleting object {key}: {e}')

    def get_object_metadata(self, key: str, bucket: str | None = None) -> dict[str, Any]:
        try:
            response = self.s3_client.head_object(Bucket=self._bucket(bucket), Key=key)
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') == '404':
                raise StorageServiceError(f'Object not found: {key}')
            logger.error(f'Error getting metadata for {key}: {e}')
            raise StorageServiceError(f'Error getting object metadata: {e}')

        return {
            'content_type': response.get('ContentType'),
            'content_length': response.get('ContentLength'),
            'last_modified': response.get('LastModified'),
            'etag': response.get('ETag'),
        }
