from django.urls import path

from events.handlers import (
    CategoryListView,
    EventAnalyticsView,
    EventDetailView,
    EventListView,
    EventSearchView,
    OrganizerEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/categories", CategoryListView.as_view(), name="event-categories"),
    path("events/search", EventSearchView.as_view(), name="event-search"),
    path("events/organizer/my-events", OrganizerEventListView.as_view(), name="organizer-events"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/analytics", EventAnalyticsView.as_view(), name="event-analytics"),
]
