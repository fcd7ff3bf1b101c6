import logging

from apps.shared.exceptions.exception import StorageServiceError
from apps.shared.storage.base import AbstractStorageService
from apps.shared.storage.s3_service import S3StorageService

logger = logging.getLogger(__name__)


class StorageFactory:
    """Creates storage backends by provider name."""

    _providers = {
        's3': S3StorageService,
    }

    @classmethod
    def create_storage_service(cls, provider: str = 's3', **kwargs) -> AbstractStorageService:
        if provider not in cls._providers:
            supported = ', '.join(cls._providers.keys())
            raise StorageServiceError(f'Unsupported storage provider: {provider}. Supported providers: {supported}')

        try:
            return cls._providers[provider](**kwargs)
        except StorageServiceError:
            raise
        except Exception as e:
            logger.error(f'Failed to create {provider} storage service: {e}')
            raise StorageServiceError(f'Failed to initialize {provider} storage: {e}')
