"""
Shared utilities and base classes for the events platform

This module provides organized access to all shared functionality:
- Base classes (DocumentModel, BaseAPIView)
- Storage (S3StorageService and backends)
- Short links (DynamicLinkService)
- Exceptions (custom exceptions)

Import specific classes directly from their locations:
- from apps.shared.base.base_api_view import BaseAPIView
- from apps.shared.container import get_event_service
- etc.
"""

# Empty init to avoid circular imports
# All imports should be done directly from submodules
