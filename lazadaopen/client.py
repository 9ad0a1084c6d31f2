# client.py
import time
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import httpx
from dlt.common import logger

from .exceptions import ConfigurationError, TransportError
from .request import LazadaRequest, LazadaResponse
from .signature import SIGN_METHOD, build_url, generate_signature, merge_params, stringify_value

# Seconds, applied to GET and POST alike.
TIMEOUT = 10

# The url-encoded api params travel in this header instead of the query or
# body. Lazada does not read them from there; see DESIGN.md before changing.
API_PARAMS_HEADER = "X-Api-Params"


class LazadaClient:
    """Signed client for the Lazada Open Platform REST API.

    ``last_rest_url`` holds the URL built by the most recent ``execute``
    call. It is a diagnostic field only: concurrent calls on the same
    client overwrite it and the last writer wins.
    """

    AUTH_URL = "https://auth.lazada.com/rest"
    AUTHORIZE_URL = "https://auth.lazada.com/oauth/authorize"

    def __init__(
        self,
        server_url: str,
        app_key: str,
        app_secret: str,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.server_url = server_url
        self.app_key = app_key
        self.app_secret = app_secret
        self.sign_method = SIGN_METHOD
        self.transport = transport
        self.last_rest_url: Optional[str] = None
        self._validate()

    def _validate(self) -> None:
        if not self.app_key:
            raise ConfigurationError("app_key is required")
        if not self.app_secret:
            raise ConfigurationError("app_secret is required")

    def _get_timestamp(self) -> int:
        """Timestamp in milliseconds."""
        return int(time.time() * 1000)

    def signature(
        self,
        common_params: Mapping[str, Any],
        api_params: Optional[Mapping[str, Any]],
        api_name: str,
    ) -> str:
        params = merge_params(common_params, api_params)
        return generate_signature(self.app_secret, str(api_name), params)

    def build_url(
        self, base_url: str, api_name: str, common_params: Mapping[str, Any]
    ) -> str:
        return build_url(base_url, api_name, common_params)

    def execute(
        self, request: LazadaRequest, access_token: Optional[str] = None
    ) -> LazadaResponse:
        """
        Sign and send one Lazada API call.

        Args:
            request: The call to make
            access_token: Token for seller APIs

        Returns:
            LazadaResponse wrapping the decoded JSON body

        Raises:
            TransportError: on connection errors, timeouts, non-2xx
                statuses and bodies that are not JSON. Nothing is retried.
        """
        timestamp = request.timestamp
        if timestamp is None:
            timestamp = self._get_timestamp()

        common_params = {
            "app_key": self.app_key,
            "timestamp": timestamp,
            "sign_method": self.sign_method,
            "access_token": access_token,
        }
        common_params["sign"] = self.signature(
            common_params, request.api_params, request.api_name
        )

        url = self.build_url(self.server_url, request.api_name, common_params)
        self.last_rest_url = url

        try:
            if request.effective_method == "POST":
                body = self._perform_post(
                    url,
                    request.api_params,
                    request.header_params,
                    request.file_params,
                )
            else:
                body = self._perform_get(url, request.api_params, request.header_params)
        except Exception as e:
            logger.warning(f"Lazada call {request.api_name} failed: {e}")
            raise TransportError(url, str(e)) from e

        return LazadaResponse(body)

    # header_params is accepted but not sent.
    def _perform_get(
        self, url: str, api_params: Mapping[str, Any], header_params: Mapping[str, str]
    ) -> Any:
        return self._send("GET", url, api_params)

    # header_params and file_params are accepted but not sent.
    def _perform_post(
        self,
        url: str,
        api_params: Mapping[str, Any],
        header_params: Mapping[str, str],
        file_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._send("POST", url, api_params)

    def _send(self, method: str, url: str, api_params: Mapping[str, Any]) -> Any:
        headers = {}
        if api_params:
            headers[API_PARAMS_HEADER] = urlencode(
                {key: stringify_value(value) for key, value in api_params.items()}
            )

        logger.debug(f"{method} {url}")
        with httpx.Client(transport=self.transport, timeout=TIMEOUT) as http:
            response = http.request(method, url, headers=headers)
            response.raise_for_status()
            return response.json()

    def get_authorization_url(self, redirect_uri: str, force_auth: bool = True) -> str:
        """
        Build the URL the seller opens to authorize the app.

        Args:
            redirect_uri: Callback URL Lazada redirects to with ``?code=...``
            force_auth: Always show the login page

        Returns:
            URL to open in a browser
        """
        params = {
            "response_type": "code",
            "client_id": self.app_key,
            "redirect_uri": redirect_uri,
            "force_auth": stringify_value(force_auth),
        }
        return f"{self.AUTHORIZE_URL}?{urlencode(params)}"

    def create_access_token(self, code: str) -> LazadaResponse:
        """
        Exchange an authorization code for an access token.

        Returns:
            LazadaResponse whose body holds access_token, refresh_token, expires_in, ...
        """
        return self._call_auth("/auth/token/create", {"code": code})

    def refresh_access_token(self, refresh_token: str) -> LazadaResponse:
        """Get a new access token from a refresh token."""
        return self._call_auth("/auth/token/refresh", {"refresh_token": refresh_token})

    def _call_auth(self, api_path: str, api_params: Dict[str, Any]) -> LazadaResponse:
        # The token endpoints read their params from the form body, so they
        # are posted there together with the signed system params.
        params = {
            "app_key": self.app_key,
            "sign_method": self.sign_method,
            "timestamp": self._get_timestamp(),
            **api_params,
        }
        params["sign"] = generate_signature(self.app_secret, api_path, params)

        url = f"{self.AUTH_URL}{api_path}"
        form = {key: stringify_value(value) for key, value in params.items()}

        try:
            with httpx.Client(transport=self.transport, timeout=TIMEOUT) as http:
                response = http.post(url, data=form)
                response.raise_for_status()
                body = response.json()
        except Exception as e:
            logger.warning(f"Lazada auth call {api_path} failed: {e}")
            raise TransportError(url, str(e)) from e

        return LazadaResponse(body).raise_for_error()
