"""Email endpoints: adapt FastAPI requests onto the shared dispatcher."""

from fastapi import APIRouter, Request, Response

from booking_relay.dispatcher import RelayRequest, RelayResponse

router = APIRouter(prefix="/api")

# Every method reaches the dispatcher so it can answer 405 in its own format
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


async def _relay_request(request: Request) -> RelayRequest:
    return RelayRequest(method=request.method, body=await request.body())


def _to_response(relay_response: RelayResponse) -> Response:
    return Response(
        content=relay_response.body_text(),
        status_code=relay_response.status_code,
        headers=relay_response.headers,
        media_type="application/json" if relay_response.body is not None else None,
    )


@router.api_route("/send-booking-email", methods=ALL_METHODS)
async def send_booking_email(request: Request):
    """Render and send one form submission."""
    dispatcher = request.app.state.dispatcher
    return _to_response(await dispatcher.dispatch(await _relay_request(request)))


@router.api_route("/test-email", methods=ALL_METHODS)
async def send_test_email(request: Request):
    """Send the fixed diagnostic email."""
    dispatcher = request.app.state.dispatcher
    return _to_response(await dispatcher.send_test_email(await _relay_request(request)))
