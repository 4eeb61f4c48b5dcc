"""
API views for the aggregator module.

This module defines the single public endpoint, which combines a random quote
and a random image URL into one response.
"""
import logging

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .aggregator import Aggregator
from .exceptions import AggregationError
from .serializers import ErrorSerializer, InspirationSerializer

logger = logging.getLogger(__name__)


class InspirationView(APIView):
    """
    Returns a random quote together with a random image URL.
    """

    permission_classes = [AllowAny]
    aggregator_class = Aggregator

    @extend_schema(
        summary="Get a quote and an image",
        description=(
            "Fetches a random quote and a random image in parallel. Both upstream "
            "calls must succeed; otherwise a single error is returned, the quote "
            "failure taking precedence when both fail."
        ),
        responses={
            200: OpenApiResponse(
                response=InspirationSerializer,
                description="Both upstreams answered",
                examples=[
                    OpenApiExample(
                        "Inspiration",
                        value={
                            "quote_info": {"text": "Stay hungry", "author": "Jane Doe"},
                            "image_url": "https://picsum.photos/id/42/800/600",
                        },
                    )
                ],
            ),
            500: OpenApiResponse(
                response=ErrorSerializer,
                description="An upstream call failed",
                examples=[
                    OpenApiExample(
                        "Upstream unreachable",
                        value={"error": "Failed to connect to DummyJSON: Connection refused"},
                    )
                ],
            ),
        },
        tags=["Inspiration"],
    )
    def get(self, request, *args, **kwargs):
        try:
            result = self.aggregator_class().get_inspiration()
        except AggregationError as e:
            logger.error(
                f"Inspiration request {getattr(request, 'request_id', 'N/A')} failed "
                f"in '{e.task}' task: {e.message}"
            )
            response = Response(
                ErrorSerializer({"error": e.message}).data,
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
            # Read by RequestLoggingMiddleware
            response.aggregation_outcome = "failed"
            response.failed_task = e.task
            return response

        response = Response(InspirationSerializer(result).data, status=status.HTTP_200_OK)
        response.aggregation_outcome = "ok"
        return response
