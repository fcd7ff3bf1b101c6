from unittest.mock import Mock

from botocore.exceptions import ClientError
from django.test import SimpleTestCase
from django.test import override_settings

from apps.shared.exceptions import StorageServiceError
from apps.shared.storage.factory import StorageFactory
from apps.shared.storage.s3_service import S3StorageService


def client_error(code, operation):
    return ClientError({'Error': {'Code': code, 'Message': code}}, operation)


class S3StorageServiceTest(SimpleTestCase):
    def setUp(self):
        self.client = Mock()
        self.service = S3StorageService(s3_client=self.client, bucket_name='default-bucket')

    def test_default_bucket(self):
        self.service.delete_file('external/images/a.jpg')

        self.client.delete_object.assert_called_once_with(Bucket='default-bucket', Key='external/images/a.jpg')

    def test_bucket_override(self):
        self.service.download_file('a.jpg', '/tmp/a.jpg', bucket='other-bucket')

        self.client.download_file.assert_called_once_with('other-bucket', 'a.jpg', '/tmp/a.jpg')

    def test_upload_sets_content_type(self):
        self.service.upload_file('/tmp/a.jpg', 'resized-1200_a.jpg', content_type='image/jpeg')

        self.client.upload_file.assert_called_once_with(
            '/tmp/a.jpg', 'default-bucket', 'resized-1200_a.jpg', ExtraArgs={'ContentType': 'image/jpeg'}
        )

    def test_delete_missing_object_is_not_an_error(self):
        self.client.delete_object.side_effect = client_error('NoSuchKey', 'DeleteObject')

        self.service.delete_file('gone.jpg')

    def test_delete_failure(self):
        self.client.delete_object.side_effect = client_error('AccessDenied', 'DeleteObject')

        with self.assertRaises(StorageServiceError):
            self.service.delete_file('locked.jpg')

    def test_metadata(self):
        self.client.head_object.return_value = {'ContentType': 'image/png', 'ContentLength': 42}

        metadata = self.service.get_object_metadata('a.png')

        self.assertEqual(metadata['content_type'], 'image/png')
        self.assertEqual(metadata['content_length'], 42)

    def test_metadata_missing_object(self):
        self.client.head_object.side_effect = client_error('404', 'HeadObject')

        with self.assertRaises(StorageServiceError):
            self.service.get_object_metadata('gone.png')


class StorageFactoryTest(SimpleTestCase):
    def test_unknown_provider(self):
        with self.assertRaises(StorageServiceError):
            StorageFactory.create_storage_service('ftp')

    @override_settings(AWS_ACCESS_KEY_ID='')
    def test_missing_configuration(self):
        with self.assertRaises(StorageServiceError):
            StorageFactory.create_storage_service()
