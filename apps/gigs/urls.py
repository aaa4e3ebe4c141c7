from django.urls import path
from .views import (
    GigCreateView, GigDetailView, MyGigsView, GigStatusUpdateView,
    PublicGigListView, GigCategoriesView
)

urlpatterns = [
    path('', GigCreateView.as_view(), name='gig_create'),
    path('public/', PublicGigListView.as_view(), name='public_gigs'),
    path('public/categories/', GigCategoriesView.as_view(), name='gig_categories'),
    path('mine/', MyGigsView.as_view(), name='my_gigs'),
    path('<int:pk>/', GigDetailView.as_view(), name='gig_detail'),
    path('<int:pk>/status/', GigStatusUpdateView.as_view(), name='gig_status_update'),
]
