from django.urls import path
from .views import ReviewCreateView, GigReviewsView

urlpatterns = [
    path('', ReviewCreateView.as_view(), name='review_create'),
    path('<int:gig_id>/', GigReviewsView.as_view(), name='gig_reviews'),
]
