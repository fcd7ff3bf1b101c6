"""
Shared exceptions for the events platform.

This module provides:
1. Core business exceptions (core_exceptions.py)
2. Infrastructure exceptions (exception.py)

Import business exceptions from core_exceptions for clean architecture.
"""

from apps.shared.exceptions.core_exceptions import AppError
from apps.shared.exceptions.core_exceptions import AuthenticationError
from apps.shared.exceptions.core_exceptions import BusinessRuleViolation
from apps.shared.exceptions.core_exceptions import PermissionError
from apps.shared.exceptions.core_exceptions import resource_not_found
from apps.shared.exceptions.core_exceptions import ResourceNotFoundError
from apps.shared.exceptions.core_exceptions import ServiceUnavailableError
from apps.shared.exceptions.core_exceptions import ValidationError
from apps.shared.exceptions.exception import LinkGenerationError
from apps.shared.exceptions.exception import StorageServiceError

__all__ = [
    # Core business exceptions
    'AppError',
    'AuthenticationError',
    'BusinessRuleViolation',
    'PermissionError',
    'ResourceNotFoundError',
    'ServiceUnavailableError',
    'ValidationError',
    # Infrastructure exceptions
    'LinkGenerationError',
    'StorageServiceError',
    # Factory functions
    'resource_not_found',
]
