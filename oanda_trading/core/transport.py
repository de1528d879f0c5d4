# oanda_trading/core/transport.py
import json
import logging
from functools import lru_cache

import requests
from pydantic import TypeAdapter, ValidationError

from .result import Err, FailureKind, Ok, RequestError

logger = logging.getLogger(__name__)

_BODY_PREVIEW = 200


@lru_cache(maxsize=None)
def _adapter(response_type):
    return TypeAdapter(response_type)


class RestTransport:
    """Authenticated GET/POST that decode the response body into a given type.

    Every failure (network, non-2xx status, undecodable body) comes back as an
    ``Err``; nothing is retried.
    """

    def __init__(self, base_url, token, session=None, timeout=None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        # The requests module itself opens a fresh connection per call.
        self.session = session if session is not None else requests
        self.timeout = timeout

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept-Datetime-Format": "RFC3339",
        }

    def get(self, path, response_type, params=None):
        return self.request("GET", path, response_type, params=params)

    def post(self, path, response_type, body):
        return self.request("POST", path, response_type, body=body)

    def request(self, method, path, response_type, params=None, body=None):
        url = self.base_url + path
        data = json.dumps(body) if body is not None else None
        try:
            response = self.session.request(
                method, url, headers=self._headers(), params=params, data=data, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            return self._fail(FailureKind.TRANSPORT, method, path, str(e) or type(e).__name__)

        if not 200 <= response.status_code < 300:
            kind = FailureKind.NOT_FOUND if response.status_code == 404 else FailureKind.HTTP_STATUS
            preview = (response.text or "")[:_BODY_PREVIEW]
            return self._fail(
                kind, method, path, f"HTTP {response.status_code}", status_code=response.status_code, body=preview
            )

        try:
            value = _adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            return self._fail(
                FailureKind.DECODE, method, path, f"{e.error_count()} validation error(s) for {response_type!r}",
                status_code=response.status_code, body=(response.text or "")[:_BODY_PREVIEW],
            )
        return Ok(value)

    @staticmethod
    def _fail(kind, method, path, message, status_code=None, body=None):
        error = RequestError(kind, method, path, message, status_code=status_code, body=body)
        logger.warning("API request failed: %s", error)
        return Err(error)
