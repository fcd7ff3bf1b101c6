"""
Shared models for the application
"""

import secrets

from django.db import models

DOCUMENT_ID_LENGTH = 20


def generate_document_id() -> str:
    """Opaque 20-character URL-safe id used as primary key for documents"""
    return secrets.token_urlsafe(15)[:DOCUMENT_ID_LENGTH]


class BaseModel(models.Model):
    """Base model with created_at and updated_at fields"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class DocumentModel(BaseModel):
    """Base model keyed by an opaque string document id"""

    id = models.CharField(
        primary_key=True,
        max_length=64,
        default=generate_document_id,
        editable=False,
    )

    class Meta:
        abstract = True
