from django.urls import path

from apps.mediafiles.views import ObjectFinalizedWebhookAPIView

app_name = 'mediafiles'

urlpatterns = [
    path('object-finalized/', ObjectFinalizedWebhookAPIView.as_view(), name='storage-object-finalized'),
]
