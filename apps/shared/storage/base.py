from abc import ABC
from abc import abstractmethod


class AbstractStorageService(ABC):
    """
    Interface for object storage backends.

    Every method accepts an optional ``bucket``; when omitted the backend's
    configured default bucket is used.
    """

    @abstractmethod
    def download_file(self, key: str, local_path: str, bucket: str | None = None) -> None:
        """
        Download an object to a local file.

        Args:
            key: Object key inside the bucket
            local_path: Destination path on the local filesystem
            bucket: Bucket name override
        """

    @abstractmethod
    def upload_file(
        self, local_path: str, key: str, content_type: str | None = None, bucket: str | None = None
    ) -> None:
        """
        Upload a local file as an object.

        Args:
            local_path: Source path on the local filesystem
            key: Destination object key
            content_type: MIME type stored with the object
            bucket: Bucket name override
        """

    @abstractmethod
    def delete_file(self, key: str, bucket: str | None = None) -> None:
        """Delete an object. Deleting a missing object is not an error."""

    @abstractmethod
    def get_object_metadata(self, key: str, bucket: str | None = None) -> dict:
        """
        Return object metadata.

        Returns:
            dict with content_type, content_length, last_modified, etag
        """
