"""
AccountManager for the auth account model.

Accounts are keyed by an opaque string uid; email is optional so that
accounts created by external identity providers without an address are valid.
"""

from django.contrib.auth.models import BaseUserManager


class AccountManager(BaseUserManager):
    use_in_migrations = True

    def normalize_email(self, email):
        """Normalize email address (lowercase domain)"""
        if email:
            return super().normalize_email(email).lower()
        return None

    def create_user(self, email: str | None = None, password: str | None = None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)

        account = self.model(email=self.normalize_email(email), **extra_fields)
        if password:
            account.set_password(password)
        else:
            account.set_unusable_password()
        account.save(using=self._db)
        return account

    def create_superuser(self, email: str, password: str, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        if not email:
            raise ValueError('Superuser must have an email address.')

        return self.create_user(email, password, **extra_fields)

    def active(self):
        return self.filter(is_active=True)
