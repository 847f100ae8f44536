"""
M-Pesa Provider
Thin client for the Safaricom Daraja API.

Endpoints used
--------------
Authentication
    GET  /oauth/v1/generate?grant_type=client_credentials  (Basic auth)
    Tokens are cached in-memory and refreshed automatically on expiry.

STK Push (Lipa na M-Pesa Online)
    POST /mpesa/stkpush/v1/processrequest
    POST /mpesa/stkpushquery/v1/query         (status poll)

The client only moves bytes: it authenticates, posts JSON and turns HTTP
failures into ProviderError. Interpreting ResponseCode / ResultCode is left
to the services.
"""

import time
from typing import Any, Dict, Optional

import requests

from stk_gateway.config import MPesaSettings
from stk_gateway.errors import InternalError, ProviderError
from stk_gateway.utils.logger import get_logger

logger = get_logger(__name__)

# Daraja endpoint paths
EP_AUTH      = "/oauth/v1/generate"
EP_STK_PUSH  = "/mpesa/stkpush/v1/processrequest"
EP_STK_QUERY = "/mpesa/stkpushquery/v1/query"

# Safaricom tokens expire in 3600s; refresh a minute early
TOKEN_EXPIRY_MARGIN = 60


class MPesaProvider:
    """M-Pesa (Daraja API) client."""

    def __init__(self, settings: MPesaSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.base_url = settings.base_url
        self.timeout  = settings.timeout

        # Token cache
        self._access_token: Optional[str] = None
        self._token_expiry: float = 0.0

        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def get_access_token(self) -> str:
        """Return a valid OAuth access token, refreshing if expired."""
        if self._access_token and time.time() < self._token_expiry:
            return self._access_token

        if not self.settings.consumer_key or not self.settings.consumer_secret:
            raise InternalError("MPesaProvider: consumer key and secret are not configured")

        url = f"{self.base_url}{EP_AUTH}"
        resp = self._session.get(
            url,
            params={"grant_type": "client_credentials"},
            auth=(self.settings.consumer_key, self.settings.consumer_secret),
            timeout=self.timeout,
        )
        data = self._handle_response(resp, "access_token")

        token = data.get("access_token")
        if not token:
            raise InternalError("MPesaProvider: token response did not contain an access_token")

        expires_in = int(data.get("expires_in", 3600))
        self._access_token = token
        self._token_expiry = time.time() + expires_in - TOKEN_EXPIRY_MARGIN

        logger.debug("MPesaProvider: access token refreshed (expires in %ds)", expires_in)
        return token

    def post(self, endpoint: str, payload: Dict[str, Any], token: str) -> Dict[str, Any]:
        """
        Execute an authenticated POST to a Daraja endpoint

        Args:
            endpoint: Path below the base URL, e.g. EP_STK_PUSH
            payload: JSON body
            token: Bearer token from get_access_token()

        Returns:
            Parsed JSON response body

        Raises:
            ProviderError: Daraja answered with a non-2xx status
            InternalError: Daraja answered 2xx with a body that is not a JSON object
            requests.RequestException: Network failure or timeout
        """
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type":  "application/json",
        }
        url = f"{self.base_url}{endpoint}"
        logger.debug("MPesa POST %s", endpoint)

        resp = self._session.post(url, json=payload, headers=headers, timeout=self.timeout)
        return self._handle_response(resp, endpoint)

    def _handle_response(self, resp: requests.Response, context: str) -> Dict[str, Any]:
        """Parse a Daraja response, raising ProviderError on HTTP errors."""
        try:
            data = resp.json()
        except ValueError:
            data = None

        logger.debug("MPesa [%s] HTTP %s: %s", context, resp.status_code, data)

        if not resp.ok:
            if isinstance(data, dict):
                message = data.get("errorMessage") or data
            else:
                message = resp.text[:300] or resp.reason
            logger.error("MPesa [%s] HTTP %s: %s", context, resp.status_code, message)
            raise ProviderError(message, status_code=resp.status_code, body=data)

        if not isinstance(data, dict):
            raise InternalError(f"MPesaProvider [{context}]: unexpected response body: {resp.text[:300]}")

        return data
