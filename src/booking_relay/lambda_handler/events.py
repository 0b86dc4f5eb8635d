"""Translate API Gateway proxy events to and from the dispatcher's request/response."""

from typing import Any

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from ..dispatcher import RelayRequest, RelayResponse


def to_relay_request(event: APIGatewayProxyEvent) -> RelayRequest:
    """
    Build a RelayRequest from a proxy event.

    Base64-encoded bodies (binary media types) are passed through still
    encoded; the dispatcher decodes them so a malformed body gets its 400.
    A missing httpMethod becomes an empty method, which the dispatcher
    rejects with 405.
    """
    return RelayRequest(
        method=event.get('httpMethod') or '',
        body=event.body,
        base64_encoded=bool(event.is_base64_encoded),
    )


def to_proxy_response(response: RelayResponse) -> dict[str, Any]:
    """
    Shape a RelayResponse as an API Gateway proxy result:

    {"statusCode": 200, "headers": {...}, "body": "..."}
    """
    headers = dict(response.headers)
    if response.body is not None:
        headers['Content-Type'] = 'application/json'
    return {
        'statusCode': response.status_code,
        'headers': headers,
        'body': response.body_text(),
    }
