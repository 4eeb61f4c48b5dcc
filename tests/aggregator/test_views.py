"""
End-to-end tests for GET /api/v1/inspire-me.

Both upstreams are mocked with ``responses``; the request goes through the
full Django middleware stack.
"""

import requests
import responses
from django.test import SimpleTestCase, override_settings
from rest_framework.test import APIClient

QUOTE_URL = "https://dummyjson.com/quotes/random"
IMAGE_URL = "https://picsum.photos/800/600"
RESOLVED_URL = "https://picsum.photos/id/42/800/600"
ENDPOINT = "/api/v1/inspire-me"


@override_settings(
    QUOTE_PROVIDER_URL=QUOTE_URL,
    IMAGE_PROVIDER_URL=IMAGE_URL,
    UPSTREAM_TIMEOUT_SECONDS=5,
    AGGREGATOR_TIMEOUT_SECONDS=10,
)
class TestInspirationView(SimpleTestCase):
    client_class = APIClient

    def mock_quote(self, **kwargs):
        if "body" not in kwargs and "json" not in kwargs:
            kwargs["json"] = {"quote": "Stay hungry", "author": "Jane Doe"}
        kwargs.setdefault("status", 200)
        responses.add(responses.GET, QUOTE_URL, **kwargs)

    def mock_image(self):
        responses.add(responses.GET, IMAGE_URL, status=302, headers={"Location": RESOLVED_URL})
        responses.add(responses.GET, RESOLVED_URL, body=b"jpeg", status=200)

    @responses.activate
    def test_success_response(self):
        self.mock_quote(json={"id": 1, "quote": "Stay hungry", "author": "Jane Doe"})
        self.mock_image()

        response = self.client.get(ENDPOINT)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "quote_info": {"text": "Stay hungry", "author": "Jane Doe"},
                "image_url": RESOLVED_URL,
            },
        )
        self.assertNotIn("error", response.json())

    @responses.activate
    def test_quote_unreachable(self):
        self.mock_quote(body=requests.ConnectionError("Connection refused"))
        self.mock_image()

        response = self.client.get(ENDPOINT)

        self.assertEqual(response.status_code, 500)
        body = response.json()
        self.assertEqual(list(body), ["error"])
        self.assertIn("Connection refused", body["error"])
        self.assertNotIn("quote_info", body)
        self.assertNotIn("image_url", body)

    @responses.activate
    def test_quote_decode_failure(self):
        self.mock_quote(json={"quote": "Stay hungry"})
        self.mock_image()

        response = self.client.get(ENDPOINT)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(list(response.json()), ["error"])
        self.assertIn("author", response.json()["error"])

    @responses.activate
    def test_image_failure(self):
        self.mock_quote()
        responses.add(responses.GET, IMAGE_URL, body=requests.ConnectionError("No route to host"))

        response = self.client.get(ENDPOINT)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(list(response.json()), ["error"])
        self.assertIn("Picsum", response.json()["error"])

    @responses.activate
    def test_both_fail_reports_quote_error(self):
        self.mock_quote(status=503)
        responses.add(responses.GET, IMAGE_URL, status=500)

        response = self.client.get(ENDPOINT)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "HTTP error from DummyJSON: 503"})

    @responses.activate
    def test_access_log_names_failed_task(self):
        self.mock_quote()
        responses.add(responses.GET, IMAGE_URL, status=404)

        with self.assertLogs("inspire_me.middleware", level="ERROR") as logs:
            response = self.client.get(ENDPOINT)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(logs.records[0].aggregation_outcome, "failed")
        self.assertEqual(logs.records[0].failed_task, "image")

    @responses.activate
    def test_each_upstream_called_once(self):
        self.mock_quote()
        self.mock_image()

        self.client.get(ENDPOINT)

        called = [call.request.url for call in responses.calls]
        self.assertEqual(called.count(QUOTE_URL), 1)
        self.assertEqual(called.count(IMAGE_URL), 1)

    @responses.activate
    def test_request_id_header(self):
        self.mock_quote()
        self.mock_image()

        response = self.client.get(ENDPOINT, HTTP_X_REQUEST_ID="req-123")

        self.assertEqual(response["X-Request-ID"], "req-123")

    def test_post_not_allowed(self):
        response = self.client.post(ENDPOINT, {})

        self.assertEqual(response.status_code, 405)

    @responses.activate
    @override_settings(QUOTE_PROVIDER_URL="http://quotes.internal/random")
    def test_provider_urls_come_from_settings(self):
        responses.add(
            responses.GET,
            "http://quotes.internal/random",
            json={"quote": "Q", "author": "A"},
            status=200,
        )
        self.mock_image()

        response = self.client.get(ENDPOINT)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["quote_info"], {"text": "Q", "author": "A"})
