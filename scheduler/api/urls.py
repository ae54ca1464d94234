from django.urls import path
from .views import ReviewView, InitialStateView, DueCardsView

urlpatterns = [
    path("reviews", ReviewView.as_view(), name="review"),
    path("recall-states/initial", InitialStateView.as_view(), name="initial-state"),
    path("due-cards", DueCardsView.as_view(), name="due-cards"),
]
