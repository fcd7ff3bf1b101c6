from django.urls import path

from apps.accounts import views

app_name = 'accounts'

urlpatterns = [
    path('profile/', views.UserProfileUpdateAPIView.as_view(), name='profile-update'),
    # Authorities
    path('authorities/change/', views.ChangeAuthoritiesAPIView.as_view(), name='authorities-change'),
    path('authorities/', views.UserAuthoritiesAPIView.as_view(), name='authorities'),
    # Settings and cached data
    path('cache-info/', views.CacheInfoAPIView.as_view(), name='cache-info'),
    path('email-active/', views.EmailActiveAPIView.as_view(), name='email-active'),
    path('me/', views.UserDataAPIView.as_view(), name='user-data'),
]
