"""
Storage backends

Import directly from submodules:
- from .base import AbstractStorageService
- from .s3_service import S3StorageService
- from .factory import StorageFactory
"""
