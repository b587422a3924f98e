from django.urls import path

from events.handlers import EventDetailView, EventListView, PromoterEventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/mine", PromoterEventListView.as_view(), name="event-mine"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
