from events.handlers.views import EventDetailView, EventListView, PromoterEventListView

__all__ = ["EventDetailView", "EventListView", "PromoterEventListView"]
