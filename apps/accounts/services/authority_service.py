"""
Authority model.

A principal's ``authorities`` map grants control over resources whose
creator id is one of its keys. Only level ``0`` grants mutation; other
levels are stored but carry no rights.
"""

import logging
from typing import Any

from django.db import transaction

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.exceptions import AuthorityPermissionError
from apps.accounts.exceptions import UserProfileMissingError
from apps.accounts.models.profile import FULL_AUTHORITY_LEVEL
from apps.accounts.models.profile import SELF_AUTHORITY
from apps.accounts.services.user_service import UserService
from apps.communities.dal.community_dal import CommunityDAL
from apps.shared.exceptions import resource_not_found
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

REMOVE_AUTHORITY_LEVEL = -1
SELF_DISPLAY_NAME = 'Me'


def has_full_authority(authorities: dict | None, resource_creator_id: str) -> bool:
    level = (authorities or {}).get(resource_creator_id)
    # bool is an int subclass; True/False are not levels
    return type(level) is int and level == FULL_AUTHORITY_LEVEL


def can_manage_event(authorities: dict | None, user_id: str, event) -> bool:
    if has_full_authority(authorities, event.creator_id):
        return True
    return bool(event.user_generated) and event.creator_id == user_id


def shares_authority(authorities: dict | None, user_id: str, creator_id: str) -> bool:
    """Any key of the map (at any level) or the principal itself"""
    return creator_id == user_id or creator_id in (authorities or {})


class AuthorityService:
    def __init__(self, dal: UserDAL = None, community_dal: CommunityDAL = None, user_service: UserService = None):
        self.dal = dal or UserDAL()
        self.community_dal = community_dal or CommunityDAL()
        self.user_service = user_service or UserService(dal=self.dal, community_dal=self.community_dal)

    @transaction.atomic
    def set_authority(self, user_id: str, authority_id: str, level: int = FULL_AUTHORITY_LEVEL) -> dict:
        profile = self.dal.get_profile_for_update(user_id)
        if profile is None:
            raise resource_not_found('User', user_id)

        authorities = dict(profile.authorities or {})
        if level == REMOVE_AUTHORITY_LEVEL:
            authorities.pop(authority_id, None)
        else:
            authorities[authority_id] = level

        profile.authorities = authorities
        self.dal.save_profile(profile, ['authorities'])
        logger.info(f'Authority {authority_id} of user {user_id} set to {level}')
        return authorities

    def change_authorities(
        self, provoker_id: str, user_id: str, authority_id: str, level: Any = FULL_AUTHORITY_LEVEL
    ) -> None:
        if not authority_id or not user_id:
            raise ValidationError(
                'user_id and authority_id are required',
                field_errors={'non_field_errors': ['user_id and authority_id are required']},
            )
        if type(level) is not int:
            raise ValidationError('Authority level must be an integer', field_errors={'level': ['Must be an integer']})

        provoker = self.dal.get_profile_or_none(provoker_id)
        if provoker is None:
            raise UserProfileMissingError(provoker_id)
        if not has_full_authority(provoker.authorities, authority_id):
            logger.warning(f'User {provoker_id} tried to change authority {authority_id} without holding it')
            raise AuthorityPermissionError(authority_id)

        self.set_authority(user_id, authority_id, level)
        self.user_service.notify(
            user_id,
            {'type': 'authority_changed', 'authority_id': authority_id, 'level': level},
        )

    def fetch_user_authorities(self, user_id: str) -> list[dict[str, str]]:
        """
        Organizers the user may publish as.

        ``self`` comes first, followed by every existing community held at
        level 0 in the order of the authorities map.
        """
        profile = self.dal.get_profile_or_none(user_id)
        if profile is None:
            raise UserProfileMissingError(user_id)

        authorities = profile.authorities or {}
        result = []
        if has_full_authority(authorities, SELF_AUTHORITY):
            result.append({'display_name': SELF_DISPLAY_NAME, 'image_id': '', 'authority_id': user_id})

        community_ids = [
            key for key in authorities if key != SELF_AUTHORITY and has_full_authority(authorities, key)
        ]
        communities = {c.id: c for c in self.community_dal.get_communities_by_ids(community_ids)}
        for community_id in community_ids:
            community = communities.get(community_id)
            if community is None:
                continue
            result.append(
                {
                    'display_name': community.display_name,
                    'image_id': community.first_image,
                    'authority_id': community.id,
                }
            )
        return result
