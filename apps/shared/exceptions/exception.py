from apps.shared.exceptions.core_exceptions import ServiceUnavailableError


class StorageServiceError(ServiceUnavailableError):
    """Generic object storage error for infrastructure failures."""

    def __init__(self, message: str = 'Storage service error occurred', **kwargs):
        super().__init__(message, error_code='storage_service_error', **kwargs)


class LinkGenerationError(ServiceUnavailableError):
    """Raised when the short link API call fails or returns no link."""

    def __init__(self, message: str = 'Short link generation failed', **kwargs):
        super().__init__(message, error_code='link_generation_failed', **kwargs)
