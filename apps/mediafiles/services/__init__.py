from apps.mediafiles.services.image_resize_service import ImageResizeService

__all__ = [
    'ImageResizeService',
]
