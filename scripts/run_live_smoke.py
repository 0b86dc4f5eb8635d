#!/usr/bin/env python3
"""
Live smoke test for the SubmissionDispatcher.

Sends every sample submission in examples/submissions.json, plus the
diagnostic email, through the dispatcher with a real Resend client, the
same path production traffic follows. Each run delivers real email to
TO_EMAIL.

Usage:
    python scripts/run_live_smoke.py               # all kinds + diagnostic
    python scripts/run_live_smoke.py booking       # one kind
"""

import asyncio
import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / '.env')

from booking_relay.clients.resend_client import ResendClient
from booking_relay.config import get_settings
from booking_relay.dispatcher import RelayRequest, SubmissionDispatcher
from booking_relay.logging import configure_logging


def load_submissions() -> dict:
    """Load sample submissions from the examples file."""
    path = Path(__file__).parent.parent / 'examples' / 'submissions.json'
    with open(path) as f:
        return json.load(f)


async def main(kinds: list[str]) -> int:
    settings = get_settings()
    configure_logging(json_output=False, log_level=settings.LOG_LEVEL)

    if not settings.email_configured:
        print('RESEND_API_KEY is not set; aborting.')
        return 1

    submissions = load_submissions()
    selected = kinds or list(submissions)
    failures = 0

    async with ResendClient(
        api_key=settings.RESEND_API_KEY,
        base_url=settings.RESEND_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    ) as client:
        dispatcher = SubmissionDispatcher(client=client, settings=settings)

        for kind in selected:
            response = await dispatcher.dispatch(
                RelayRequest(method='POST', body=json.dumps(submissions[kind]))
            )
            print(f'{kind:<10} {response.status_code} {response.body}')
            failures += response.status_code != 200

        if not kinds:
            response = await dispatcher.send_test_email(RelayRequest(method='GET'))
            print(f'{"test":<10} {response.status_code} {response.body}')
            failures += response.status_code != 200

    print(f'\n{failures} failure(s)')
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(asyncio.run(main(sys.argv[1:])))
