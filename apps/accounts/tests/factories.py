import factory

from apps.accounts.models import Account
from apps.accounts.models import UserEventLink
from apps.accounts.models import UserProfile
from apps.accounts.models import UserTicket
from apps.shared.base.models import generate_document_id

TEST_PASSWORD = 'testpass123!'


class AccountFactory(factory.django.DjangoModelFactory):
    """Factory for auth accounts"""

    class Meta:
        model = Account

    email = factory.Sequence(lambda n: f'user{n}@example.com')
    display_name = factory.Faker('name')
    password = factory.django.Password(TEST_PASSWORD)
    is_active = True


class StaffAccountFactory(AccountFactory):
    is_staff = True


class UserProfileFactory(factory.django.DjangoModelFactory):
    """Profile document; pass ``id=account.id`` to attach it to an account"""

    class Meta:
        model = UserProfile

    id = factory.LazyFunction(generate_document_id)


class UserEventLinkFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = UserEventLink

    user_id = factory.LazyFunction(generate_document_id)
    event_id = factory.LazyFunction(generate_document_id)
    kind = UserEventLink.Kind.ATTENDING


class UserTicketFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = UserTicket

    user_id = factory.LazyFunction(generate_document_id)
    event_id = factory.LazyFunction(generate_document_id)
    ticket_id = factory.LazyFunction(generate_document_id)
    status = UserTicket.Status.VALID
