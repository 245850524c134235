from django.urls import path

from events.handlers import EventDetailView, EventListView, EventSearchView

urlpatterns = [
    path("events/", EventListView.as_view(), name="event-list"),
    path("events/search/<str:query>", EventSearchView.as_view(), name="event-search"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
]
