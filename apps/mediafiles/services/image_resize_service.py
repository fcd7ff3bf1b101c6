"""
Post-processing of uploaded event images.

Every finalized upload is replaced by a copy resized to a fixed width with a
height capped at a 3:4 portrait ratio, stored next to the original under a
``resized-<width>_`` name.
"""

import logging
import math
import posixpath
import shutil
import tempfile
from pathlib import Path

from django.conf import settings
from PIL import Image
from PIL import ImageOps

from apps.shared.storage.factory import StorageFactory
from apps.shared.utils.best_effort import attempt

logger = logging.getLogger(__name__)

MAX_HEIGHT_RATIO = 4 / 3
RGB_ONLY_FORMATS = ('JPEG',)


class ImageResizeService:
    def __init__(self, storage_service=None, width: int = None, marker: str = None, storage_factory=None):
        self._storage_service = storage_service
        self._storage_factory = storage_factory or StorageFactory.create_storage_service
        self.width = width or settings.MEDIA_RESIZE_WIDTH
        self.marker = marker or settings.MEDIA_RESIZE_PREFIX

    @property
    def storage_service(self):
        if self._storage_service is None:
            self._storage_service = self._storage_factory()
        return self._storage_service

    def resized_name(self, file_name: str) -> str:
        return f'{self.marker}-{self.width}_{file_name}'

    def should_process(self, key: str, content_type: str | None) -> bool:
        file_name = posixpath.basename(key)
        if self.marker in file_name:
            return False
        return bool(content_type) and content_type.startswith('image/')

    def target_size(self, width: int, height: int) -> tuple[int, int]:
        max_height = round(self.width * MAX_HEIGHT_RATIO)
        return self.width, max(1, min(math.floor(height / width * self.width), max_height))

    def resize_file(self, source_path: str, target_path: str) -> tuple[int, int]:
        """Cover-fit the image into the target size and write it to ``target_path``"""
        with Image.open(source_path) as image:
            image_format = image.format
            size = self.target_size(*image.size)
            resized = ImageOps.fit(image, size, method=Image.Resampling.LANCZOS)
            if image_format in RGB_ONLY_FORMATS and resized.mode not in ('RGB', 'L'):
                resized = resized.convert('RGB')
            resized.save(target_path, format=image_format)
        return size

    def process_uploaded_image(self, bucket: str, key: str, content_type: str | None = None) -> dict | None:
        """
        Resize a finalized upload and replace the original.

        Returns:
            Summary dict, or None when the object is skipped
        """
        if content_type is None:
            content_type = self.storage_service.get_object_metadata(key, bucket=bucket).get('content_type')

        if not self.should_process(key, content_type):
            logger.debug(f'Skipping {key} ({content_type})')
            return None

        file_name = posixpath.basename(key)
        resized_key = posixpath.join(posixpath.dirname(key), self.resized_name(file_name))
        working_dir = tempfile.mkdtemp(prefix='resize-')
        try:
            source_path = str(Path(working_dir) / file_name)
            target_path = str(Path(working_dir) / self.resized_name(file_name))

            self.storage_service.download_file(key, source_path, bucket=bucket)
            size = self.resize_file(source_path, target_path)

            uploaded = attempt(
                f'upload of {resized_key}',
                self.storage_service.upload_file,
                target_path,
                resized_key,
                content_type=content_type,
                bucket=bucket,
            )
            original_deleted = uploaded and attempt(
                f'delete of original {key}', self.storage_service.delete_file, key, bucket=bucket
            )
        finally:
            shutil.rmtree(working_dir, ignore_errors=True)

        logger.info(f'Resized {key} to {size[0]}x{size[1]} as {resized_key}')
        return {
            'key': resized_key,
            'width': size[0],
            'height': size[1],
            'uploaded': uploaded,
            'original_deleted': original_deleted,
        }
