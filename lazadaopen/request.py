"""Request and response value objects for Lazada Open Platform calls."""

from typing import Any, Dict, Optional, Union

from .exceptions import ApiError

ParamValue = Union[str, int, float, bool, None]

SUCCESS_CODE = "0"


class LazadaRequest:
    """A single API call: name, business params and the HTTP method.

    ``header_params`` and ``file_params`` are kept on the request but the
    client does not forward them; a non-empty ``file_params`` only switches
    the call to POST.
    """

    def __init__(
        self,
        api_name: str,
        api_params: Optional[Dict[str, ParamValue]] = None,
        http_method: Optional[str] = None,
        timestamp: Optional[int] = None,
        header_params: Optional[Dict[str, str]] = None,
        file_params: Optional[Dict[str, Any]] = None,
    ):
        if not api_name:
            raise ValueError("api_name is required")

        self.api_name = api_name
        self.api_params: Dict[str, ParamValue] = dict(api_params or {})
        self.http_method = http_method.upper() if http_method else None
        self.timestamp = timestamp
        self.header_params: Dict[str, str] = dict(header_params or {})
        self.file_params: Dict[str, Any] = dict(file_params or {})

    def add_api_param(self, key: str, value: ParamValue) -> "LazadaRequest":
        self.api_params[key] = value
        return self

    def add_header_param(self, key: str, value: str) -> "LazadaRequest":
        self.header_params[key] = value
        return self

    def add_file_param(self, key: str, value: Any) -> "LazadaRequest":
        self.file_params[key] = value
        return self

    @property
    def effective_method(self) -> str:
        """POST when asked for explicitly or when files are attached, else GET."""
        if self.http_method == "POST" or self.file_params:
            return "POST"
        return "GET"

    def __repr__(self) -> str:
        return (
            f"LazadaRequest(api_name={self.api_name!r}, "
            f"method={self.effective_method}, params={sorted(self.api_params)})"
        )


class LazadaResponse:
    """Decoded payload of a Lazada call.

    Lazada wraps results in an envelope (``code``, ``type``, ``message``,
    ``request_id``, ``data``). The accessors return None when the body is
    not a mapping or the field is missing.
    """

    def __init__(self, body: Any):
        self.body = body

    def _field(self, name: str) -> Any:
        if isinstance(self.body, dict):
            return self.body.get(name)
        return None

    @property
    def code(self) -> Optional[str]:
        code = self._field("code")
        return None if code is None else str(code)

    @property
    def type(self) -> Optional[str]:
        return self._field("type")

    @property
    def message(self) -> Optional[str]:
        return self._field("message")

    @property
    def request_id(self) -> Optional[str]:
        return self._field("request_id")

    @property
    def data(self) -> Any:
        return self._field("data")

    @property
    def is_success(self) -> bool:
        return self.code is None or self.code == SUCCESS_CODE

    def raise_for_error(self) -> "LazadaResponse":
        """Raise ApiError when Lazada reported a failure."""
        if not self.is_success:
            raise ApiError(self.code, self.message, self.request_id)
        return self

    def __repr__(self) -> str:
        return f"LazadaResponse(code={self.code!r}, request_id={self.request_id!r})"
