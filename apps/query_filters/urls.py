from django.urls import path

from apps.query_filters.views import ListingView

app_name = "query_filters"

urlpatterns = [
    path(
        "pages/<slug:slug>/lists/<str:query_id>/",
        ListingView.as_view(),
        name="listing",
    ),
]
