"""
Serializers for the inspiration API.
"""
from rest_framework import serializers


class QuoteInfoSerializer(serializers.Serializer):
    text = serializers.CharField()
    author = serializers.CharField()


class InspirationSerializer(serializers.Serializer):
    """Renders an ``AggregateResult`` in the public response shape."""

    quote_info = QuoteInfoSerializer(source="quote")
    image_url = serializers.CharField(source="image.url")


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
