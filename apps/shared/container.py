from collections.abc import Callable

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.services.authority_service import AuthorityService
from apps.accounts.services.user_lifecycle_service import UserLifecycleService
from apps.accounts.services.user_service import UserService
from apps.communities.dal.community_dal import CommunityDAL
from apps.events.dal.event_dal import EventDAL
from apps.events.dal.ticket_dal import TicketDAL
from apps.events.services.event_service import EventService
from apps.events.services.event_trigger_service import EventTriggerService
from apps.events.services.ticket_service import TicketService
from apps.mediafiles.services.image_resize_service import ImageResizeService
from apps.shared.links.dynamic_link_service import DynamicLinkService
from apps.shared.storage.factory import StorageFactory


class Container:
    """
    Simple DI Container for managing service dependencies.

    Factories can be overridden in tests to swap external collaborators
    (object storage, short links) for doubles.
    """

    def __init__(self):
        self._dal_factories = {}
        self._service_factories = {}
        self._setup_default_factories()

    def _setup_default_factories(self):
        self._dal_factories = {
            'event_dal': EventDAL,
            'ticket_dal': TicketDAL,
            'user_dal': UserDAL,
            'community_dal': CommunityDAL,
        }

        self._service_factories = {
            'storage_service': StorageFactory.create_storage_service,
            'link_service': DynamicLinkService,
        }

    def _dal(self, name: str):
        return self._dal_factories[name]()

    def event_service(self) -> EventService:
        """Create EventService with all dependencies injected"""
        event_dal = self._dal('event_dal')
        user_dal = self._dal('user_dal')
        link_service = self._service_factories['link_service']()
        return EventService(
            dal=event_dal,
            user_dal=user_dal,
            community_dal=self._dal('community_dal'),
            ticket_service=self.ticket_service(event_dal=event_dal, user_dal=user_dal, link_service=link_service),
            link_service=link_service,
        )

    def ticket_service(self, event_dal=None, user_dal=None, link_service=None) -> TicketService:
        return TicketService(
            dal=self._dal('ticket_dal'),
            event_dal=event_dal or self._dal('event_dal'),
            user_dal=user_dal or self._dal('user_dal'),
            link_service=link_service or self._service_factories['link_service'](),
        )

    def event_trigger_service(self) -> EventTriggerService:
        return EventTriggerService(
            dal=self._dal('event_dal'),
            ticket_dal=self._dal('ticket_dal'),
            user_dal=self._dal('user_dal'),
            storage_factory=self._service_factories['storage_service'],
        )

    def user_service(self) -> UserService:
        return UserService(dal=self._dal('user_dal'), community_dal=self._dal('community_dal'))

    def authority_service(self) -> AuthorityService:
        user_dal = self._dal('user_dal')
        community_dal = self._dal('community_dal')
        return AuthorityService(
            dal=user_dal,
            community_dal=community_dal,
            user_service=UserService(dal=user_dal, community_dal=community_dal),
        )

    def user_lifecycle_service(self) -> UserLifecycleService:
        return UserLifecycleService(dal=self._dal('user_dal'), event_dal=self._dal('event_dal'))

    def image_resize_service(self) -> ImageResizeService:
        return ImageResizeService(storage_factory=self._service_factories['storage_service'])

    # Override methods for testing
    def override_storage_service(self, factory: Callable):
        self._service_factories['storage_service'] = factory

    def override_link_service(self, factory: Callable):
        self._service_factories['link_service'] = factory

    def reset_to_defaults(self):
        """Reset all factories to defaults - useful for test cleanup"""
        self._setup_default_factories()


# Global container instance
_container = Container()


def get_container() -> Container:
    return _container


def get_event_service() -> EventService:
    return get_container().event_service()


def get_ticket_service() -> TicketService:
    return get_container().ticket_service()


def get_event_trigger_service() -> EventTriggerService:
    return get_container().event_trigger_service()


def get_user_service() -> UserService:
    return get_container().user_service()


def get_authority_service() -> AuthorityService:
    return get_container().authority_service()


def get_user_lifecycle_service() -> UserLifecycleService:
    return get_container().user_lifecycle_service()


def get_image_resize_service() -> ImageResizeService:
    return get_container().image_resize_service()
