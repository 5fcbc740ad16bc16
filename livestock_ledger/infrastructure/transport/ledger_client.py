"""HTTP transport of canonical payloads to the remote ledger service."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from livestock_ledger.config import get_settings
from livestock_ledger.domain.entities.canonical_payload import CanonicalPayload
from livestock_ledger.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Success! Data transmitted to server."


@dataclass(frozen=True)
class TransportAcknowledgement:
    """Successful response from the ledger service."""

    status_code: int
    message: str
    body: Optional[Dict[str, Any]] = None
    dry_run: bool = False


class LedgerTransportClient:
    """POST canonical payloads as JSON; one request per submission, no retries."""

    def __init__(
        self,
        *,
        url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        dry_run: Optional[bool] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_settings()
        self._url = (url or settings.ledger_api_url or "").strip()
        self._token = token if token is not None else settings.ledger_api_token
        self._timeout = timeout if timeout is not None else settings.ledger_api_timeout
        self._dry_run = settings.ledger_api_dry_run if dry_run is None else dry_run
        self._http = session or requests

    @property
    def url(self) -> str:
        return self._url

    def send(self, payload: CanonicalPayload) -> TransportAcknowledgement:
        """Deliver ``payload``.

        Raises:
            TransportError: non-success status or the endpoint could not be reached.
        """
        document = payload.to_dict()

        if self._dry_run:
            logger.info(
                "Dry run: payload for row %s not sent to %s", payload.raw_row.id, self._url,
                extra={"payload": json.dumps(document, ensure_ascii=False)},
            )
            return TransportAcknowledgement(status_code=200, message=SUCCESS_MESSAGE, dry_run=True)

        if not self._url:
            raise TransportError("LEDGER_API_URL is not configured")

        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        try:
            response = self._http.post(self._url, json=document, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("Ledger service unreachable: %s", exc, extra={"row_id": payload.raw_row.id})
            raise TransportError(f"Could not reach ledger service: {exc}") from exc

        body = _json_body(response)
        if not response.ok:
            message = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("detail")
            message = str(message) if message else f"Server Error: {response.status_code}"
            logger.warning(
                "Ledger service rejected payload: %s", message,
                extra={"row_id": payload.raw_row.id, "status_code": response.status_code},
            )
            raise TransportError(message, status_code=response.status_code)

        logger.info(
            "Payload for row %s delivered", payload.raw_row.id,
            extra={"status_code": response.status_code},
        )
        return TransportAcknowledgement(
            status_code=response.status_code,
            message=SUCCESS_MESSAGE,
            body=body if isinstance(body, dict) else None,
        )


def _json_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
