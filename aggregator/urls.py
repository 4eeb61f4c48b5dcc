"""
URL patterns for the aggregator API.
"""
from django.urls import path

from .views import InspirationView

app_name = "aggregator"

urlpatterns = [
    path("inspire-me", InspirationView.as_view(), name="inspire-me"),
]
