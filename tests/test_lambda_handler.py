"""Tests for the Lambda handler entry points."""

import base64
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from conftest import make_settings

from booking_relay.dispatcher import CORS_HEADERS
from booking_relay.lambda_handler.handler import send_booking_email_handler, send_test_email_handler
from booking_relay.models import DeliveryResult


def _proxy_event(method: str, path: str, body: str | None = None, base64_encoded: bool = False) -> dict:
    if body is not None and base64_encoded:
        body = base64.b64encode(body.encode()).decode()
    return {
        "resource": path,
        "path": path,
        "httpMethod": method,
        "headers": {"Content-Type": "application/json"},
        "multiValueHeaders": {},
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "requestId": "req-1",
            "stage": "prod",
            "httpMethod": method,
            "path": path,
            "identity": {"sourceIp": "127.0.0.1"},
        },
        "body": body,
        "isBase64Encoded": base64_encoded,
    }


def _context() -> MagicMock:
    context = MagicMock()
    context.function_name = "test"
    context.memory_limit_in_mb = 256
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123:function:test"
    context.aws_request_id = "req-1"
    return context


def _client() -> AsyncMock:
    client = AsyncMock()
    client.send.return_value = DeliveryResult(success=True, provider_id="email-1")
    return client


SEND_PATH = "/api/send-booking-email"


class TestSendBookingEmailHandler:
    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_successful_submission(self, mock_build, mock_settings, booking_body):
        client = _client()
        mock_build.return_value = client

        result = send_booking_email_handler(_proxy_event("POST", SEND_PATH, booking_body), _context())

        assert result["statusCode"] == 200
        assert json.loads(result["body"]) == {"success": True, "data": {"id": "email-1"}}
        assert result["headers"]["Content-Type"] == "application/json"
        for name, value in CORS_HEADERS.items():
            assert result["headers"][name] == value
        client.send.assert_awaited_once()
        client.close.assert_awaited_once()

    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_base64_body(self, mock_build, mock_settings, contact_body):
        mock_build.return_value = _client()

        event = _proxy_event("POST", SEND_PATH, contact_body, base64_encoded=True)
        result = send_booking_email_handler(event, _context())

        assert result["statusCode"] == 200

    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_malformed_base64_body(self, mock_build, mock_settings):
        client = _client()
        mock_build.return_value = client
        event = _proxy_event("POST", SEND_PATH)
        event["body"] = "!!!notb64"
        event["isBase64Encoded"] = True

        result = send_booking_email_handler(event, _context())

        assert result["statusCode"] == 400
        assert json.loads(result["body"]) == {
            "success": False,
            "error": "Request body is not valid JSON",
        }
        assert result["headers"]["Access-Control-Allow-Origin"] == "*"
        client.send.assert_not_awaited()

    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_missing_method_is_405(self, mock_build, mock_settings, booking_body):
        client = _client()
        mock_build.return_value = client
        event = _proxy_event("POST", SEND_PATH, booking_body)
        del event["httpMethod"]

        result = send_booking_email_handler(event, _context())

        assert result["statusCode"] == 405
        client.send.assert_not_awaited()

    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_wrong_method(self, mock_build, mock_settings):
        client = _client()
        mock_build.return_value = client

        result = send_booking_email_handler(_proxy_event("GET", SEND_PATH), _context())

        assert result["statusCode"] == 405
        client.send.assert_not_awaited()

    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_options_preflight(self, mock_build, mock_settings):
        mock_build.return_value = _client()

        result = send_booking_email_handler(_proxy_event("OPTIONS", SEND_PATH), _context())

        assert result["statusCode"] == 200
        assert result["body"] == ""
        assert result["headers"]["Access-Control-Allow-Origin"] == "*"

    @patch("booking_relay.lambda_handler.handler.get_settings")
    def test_missing_key(self, mock_settings, booking_body):
        mock_settings.return_value = make_settings(RESEND_API_KEY=None)

        result = send_booking_email_handler(_proxy_event("POST", SEND_PATH, booking_body), _context())

        assert result["statusCode"] == 500
        assert json.loads(result["body"])["error"] == (
            "Email service not configured. Please contact administrator."
        )

    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_missing_fields(self, mock_build, mock_settings):
        client = _client()
        mock_build.return_value = client
        body = json.dumps({"type": "contact", "data": {"email": "a@example.com"}})

        result = send_booking_email_handler(_proxy_event("POST", SEND_PATH, body), _context())

        assert result["statusCode"] == 400
        assert json.loads(result["body"])["missing_fields"] == ["name"]
        client.send.assert_not_awaited()
        client.close.assert_awaited_once()


class TestTestEmailHandler:
    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_sends_diagnostic(self, mock_build, mock_settings):
        client = _client()
        mock_build.return_value = client

        result = send_test_email_handler(_proxy_event("GET", "/api/test-email"), _context())

        assert result["statusCode"] == 200
        body = json.loads(result["body"])
        assert body["success"] is True
        assert body["data"] == {"id": "email-1"}
        assert client.send.await_args.args[0].subject == "Test Email - Car Rental System"

    @patch("booking_relay.lambda_handler.handler.get_settings")
    def test_missing_key(self, mock_settings):
        mock_settings.return_value = make_settings(RESEND_API_KEY=None)

        result = send_test_email_handler(_proxy_event("GET", "/api/test-email"), _context())

        assert result["statusCode"] == 500

    @patch("booking_relay.lambda_handler.handler.get_settings", return_value=make_settings())
    @patch("booking_relay.lambda_handler.handler._build_client")
    def test_missing_method_sends_nothing(self, mock_build, mock_settings):
        client = _client()
        mock_build.return_value = client
        event = _proxy_event("GET", "/api/test-email")
        del event["httpMethod"]

        result = send_test_email_handler(event, _context())

        assert result["statusCode"] == 405
        client.send.assert_not_awaited()


class TestBuildClient:
    def test_none_without_key(self):
        from booking_relay.lambda_handler.handler import _build_client

        assert _build_client(make_settings(RESEND_API_KEY=None)) is None

    def test_client_with_key(self):
        from booking_relay.lambda_handler.handler import _build_client
        from booking_relay.clients.resend_client import ResendClient

        client = _build_client(make_settings())
        assert isinstance(client, ResendClient)
        assert client.api_key == "re_test_key"
