from django.contrib import admin
from django.urls import include, path

from common.handlers.health import HealthView

api_urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("", include("accounts.urls")),
    path("", include("events.urls")),
    path("", include("bookings.urls")),
    path("", include("payments.urls")),
    path("", include("reviews.urls")),
    path("", include("notifications.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include(api_urlpatterns)),
]

handler404 = "common.handlers.exceptions.not_found"
handler500 = "common.handlers.exceptions.server_error"
