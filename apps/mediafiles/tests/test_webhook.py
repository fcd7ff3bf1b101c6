from unittest.mock import patch

from django.test import TestCase
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient


def notification(*records):
    return {
        'Records': [
            {
                'eventName': event_name,
                's3': {'bucket': {'name': 'media-bucket'}, 'object': {'key': key, 'size': 1024}},
            }
            for event_name, key in records
        ]
    }


@override_settings(STORAGE_WEBHOOK_TOKEN='webhook-secret')
class ObjectFinalizedWebhookTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse('mediafiles:storage-object-finalized')

    def test_missing_token(self):
        response = self.client.post(self.url, notification(('ObjectCreated:Put', 'a.jpg')), format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['kind'], 'unauthenticated')

    def test_wrong_token(self):
        response = self.client.post(
            self.url,
            notification(('ObjectCreated:Put', 'a.jpg')),
            format='json',
            HTTP_X_STORAGE_WEBHOOK_TOKEN='guess',
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    @patch('apps.mediafiles.views.process_uploaded_image')
    def test_created_objects_are_queued(self, task):
        body = notification(
            ('ObjectCreated:Put', 'external/images/my+photo.jpg'),
            ('ObjectRemoved:Delete', 'external/images/old.jpg'),
        )

        response = self.client.post(self.url, body, format='json', HTTP_X_STORAGE_WEBHOOK_TOKEN='webhook-secret')

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data, {'status': 'ok', 'response': {'queued': 1}})
        task.delay.assert_called_once_with('media-bucket', 'external/images/my photo.jpg', None)

    def test_malformed_body(self):
        response = self.client.post(
            self.url, {'Records': [{'eventName': 'x'}]}, format='json', HTTP_X_STORAGE_WEBHOOK_TOKEN='webhook-secret'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
