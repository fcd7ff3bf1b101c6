from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.accounts.tests.factories import AccountFactory
from apps.accounts.tests.factories import UserProfileFactory
from apps.communities.tests.factories import CommunityFactory


class UserCallablesTest(TestCase):
    """POST callables under /api/v1/users/"""

    def setUp(self):
        self.client = APIClient()
        self.account = AccountFactory(display_name='Olga')
        self.profile = UserProfileFactory(id=self.account.id, user_rating=4)
        self.client.force_authenticate(user=self.account)

    def test_unauthenticated(self):
        response = APIClient().post(reverse('accounts:user-data'), {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['kind'], 'unauthenticated')

    def test_fetch_user_data(self):
        response = self.client.post(reverse('accounts:user-data'), {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'status': 'ok', 'response': {'user_rating': 4}})

    def test_missing_profile_is_failed_precondition(self):
        self.profile.delete()

        response = self.client.post(reverse('accounts:user-data'), {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'failed-precondition')
        self.assertEqual(response.data['message'], 'User does not exist')

    def test_update_profile(self):
        response = self.client.post(
            reverse('accounts:profile-update'), {'display_name': 'Olga K.'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['response']['displayName'], 'Olga K.')

    def test_email_active(self):
        response = self.client.post(reverse('accounts:email-active'), {'email_active': False}, format='json')

        self.assertEqual(response.data['response'], {'email_active': False})
        self.profile.refresh_from_db()
        self.assertFalse(self.profile.email_active)

    def test_cache_info(self):
        response = self.client.post(reverse('accounts:cache-info'), {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('cacheValid', response.data['response'])

    def test_fetch_authorities(self):
        response = self.client.post(reverse('accounts:authorities'), {}, format='json')

        self.assertEqual(
            response.data['response'], [{'display_name': 'Me', 'image_id': '', 'authority_id': self.account.id}]
        )

    def test_change_authorities_permission_denied(self):
        community = CommunityFactory()
        member = UserProfileFactory()

        response = self.client.post(
            reverse('accounts:authorities-change'),
            {'user_id': member.id, 'authority_id': community.id, 'level': 0},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['kind'], 'permission-denied')

    def test_change_authorities(self):
        community = CommunityFactory()
        member = UserProfileFactory()
        self.profile.authorities = {'self': 0, community.id: 0}
        self.profile.save()

        response = self.client.post(
            reverse('accounts:authorities-change'),
            {'user_id': member.id, 'authority_id': community.id, 'level': 0},
            format='json',
        )

        member.refresh_from_db()
        self.assertEqual(response.data, {'status': 'ok', 'response': None})
        self.assertEqual(member.authorities[community.id], 0)
