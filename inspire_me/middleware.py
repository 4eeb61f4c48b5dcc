"""
Custom middleware components for the Inspire Me application.

This module defines middleware classes for:
- Request ID generation and tracking
- Access logging
"""
import logging
import time
import uuid

logger = logging.getLogger(__name__)


class RequestIDMiddleware:
    """
    Middleware to generate and attach a unique request ID to each request.

    A client-supplied ``X-Request-ID`` is kept so traces can span services.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.META.get('HTTP_X_REQUEST_ID') or str(uuid.uuid4())

        request.request_id = request_id

        response = self.get_response(request)

        response['X-Request-ID'] = request_id

        return response


class RequestLoggingMiddleware:
    """
    Access log for ``/api/`` requests.

    Each request produces one record whose ``extra`` fields carry the method,
    path, status, duration, client IP and request id, so the JSON log file
    gets them as separate keys. When a view marks its response with
    ``aggregation_outcome`` (and ``failed_task`` on failure) those are logged
    too, which lets a 500 be traced to the upstream that caused it.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith('/api/'):
            return self.get_response(request)

        start_time = time.monotonic()
        response = self.get_response(request)
        duration_ms = round((time.monotonic() - start_time) * 1000, 1)

        log_data = {
            'method': request.method,
            'path': request.path,
            'status_code': response.status_code,
            'duration_ms': duration_ms,
            'client_ip': self._get_client_ip(request),
            'request_id': getattr(request, 'request_id', 'N/A'),
        }

        outcome = getattr(response, 'aggregation_outcome', None)
        if outcome is not None:
            log_data['aggregation_outcome'] = outcome
            log_data['failed_task'] = getattr(response, 'failed_task', None)

        message = (
            f"{request.method} {request.path} {response.status_code} "
            f"{duration_ms}ms request_id={log_data['request_id']}"
        )
        if outcome == 'failed':
            message += f" failed_task={log_data['failed_task']}"

        if response.status_code >= 500:
            logger.error(message, extra=log_data)
        elif response.status_code >= 400:
            logger.warning(message, extra=log_data)
        else:
            logger.info(message, extra=log_data)

        return response

    def _get_client_ip(self, request):
        """First hop of X-Forwarded-For, else the socket peer."""
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')
