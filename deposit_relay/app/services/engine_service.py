"""
Client for the Engine transaction service.

Every call opens its own ``httpx.AsyncClient``; nothing is shared between
requests except the immutable settings.
"""
import logging
from typing import Any

import httpx

from deposit_relay.app.core.config import Settings
from deposit_relay.app.core.exceptions import EngineRequestError, ErrorKind
from deposit_relay.app.schemas.engine import EngineCallOptions, EngineResponseEnvelope

logger = logging.getLogger(__name__)


def _parse_envelope(payload: Any) -> EngineResponseEnvelope:
    if not isinstance(payload, dict):
        return EngineResponseEnvelope()
    return EngineResponseEnvelope.model_validate(payload)


def _upstream_status(envelope: EngineResponseEnvelope, response: httpx.Response) -> int:
    # An upstream failure never maps to a success status.
    candidates = (
        envelope.error.statusCode if envelope.error else None,
        envelope.statusCode,
        response.status_code,
    )
    for code in candidates:
        if code and 400 <= code <= 599:
            return code
    return 500


class EngineClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def _url(self, path: str) -> str:
        return f"{self.settings.engine_base_url}/{path.lstrip('/')}"

    def _auth_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.ENGINE_ACCESS_TOKEN}",
            "x-backend-wallet-address": self.settings.BACKEND_WALLET_ADDRESS,
        }

    async def call(self, path: str, options: EngineCallOptions | None = None) -> Any:
        """
        Perform an authenticated Engine request and return the ``result``
        field of its JSON envelope.

        Caller headers are merged over the base auth headers. The result
        is returned as-is; checking its shape is up to the caller.

        Raises:
            EngineRequestError: on a non-2xx status, an unparseable body,
                a network failure, or a request httpx cannot build.
        """
        options = options or EngineCallOptions()
        url = self._url(path)
        headers = {**self._auth_headers(), **options.headers}

        logger.info("Calling Engine: %s %s", options.method, url)
        if options.body is not None:
            logger.info("Engine Request Body: %s", options.body)

        try:
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                response = await client.request(
                    options.method, url, headers=headers, json=options.body
                )
        except httpx.RequestError as e:
            detail = str(e) or e.__class__.__name__
            logger.error("Engine request to %s failed: %s", url, detail)
            raise EngineRequestError(
                ErrorKind.TRANSPORT,
                f"Failed to reach Engine: {detail}",
            ) from e
        except Exception as e:
            # Raised while building the request, e.g. a header value httpx cannot encode.
            detail = str(e) or e.__class__.__name__
            logger.error("Could not send Engine request to %s: %s", url, detail)
            raise EngineRequestError(
                ErrorKind.INTERNAL,
                f"Could not send Engine request: {detail}",
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                "Engine returned a non-JSON response (status %s): %s",
                response.status_code,
                response.text[:500],
            )
            raise EngineRequestError(
                ErrorKind.INVALID_RESPONSE,
                f"Engine returned a non-JSON response with status {response.status_code}",
                status_code=response.status_code if response.status_code >= 400 else None,
            ) from e

        envelope = _parse_envelope(payload)

        if not response.is_success:
            logger.error("Engine API Error: %s", payload)
            reason = (envelope.error.message if envelope.error else None) or response.reason_phrase
            raise EngineRequestError(
                ErrorKind.UPSTREAM,
                f"Engine API request failed with status {response.status_code}: {reason}",
                status_code=_upstream_status(envelope, response),
                envelope=payload if isinstance(payload, dict) else None,
            )

        logger.info("Engine Response: %s", payload)
        return envelope.result
