"""
URL configuration for the Inspire Me project.
"""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("api/v1/", include("aggregator.urls")),  # Inspiration API

    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),  # API schema
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),  # Swagger UI
]
