from events.handlers.views import EventDetailView, EventListView, EventSearchView

__all__ = ["EventListView", "EventSearchView", "EventDetailView"]
