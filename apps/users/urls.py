from django.urls import path
from .views import AuthLoginView, LogoutView, UserProfileView, FavoritesView, FavoriteGigView

urlpatterns = [
    # Authentication
    path('auth/login/', AuthLoginView.as_view(), name='auth_login'),
    path('auth/logout/', LogoutView.as_view(), name='auth_logout'),

    # Profile
    path('profile/', UserProfileView.as_view(), name='user_profile'),

    # Favorites
    path('favorites/', FavoritesView.as_view(), name='favorites'),
    path('favorites/<int:gig_id>/', FavoriteGigView.as_view(), name='favorite_gig'),
]
