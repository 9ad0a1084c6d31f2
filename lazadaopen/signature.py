# signature.py
import hashlib
import hmac
from typing import Any, Mapping, Optional

SIGN_METHOD = "sha256"


def stringify_value(value: Any) -> str:
    """Render a parameter value the way Lazada expects it in the base string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def merge_params(
    common_params: Mapping[str, Any], api_params: Optional[Mapping[str, Any]]
) -> dict:
    """Overlay api params on top of the common params (api params win)."""
    if api_params is None:
        return dict(common_params)
    return {**common_params, **api_params}


def signature_base_string(api_path: str, parameters: Mapping[str, Any]) -> str:
    """
    Build the string Lazada signs.

    api_path + key1 + value1 + key2 + value2 + ... with keys sorted
    by their string form, no separators.
    """
    sorted_items = sorted(parameters.items(), key=lambda item: str(item[0]))

    params_string = "".join(
        f"{key}{stringify_value(value)}" for key, value in sorted_items
    )
    return f"{api_path}{params_string}"


def generate_signature(
    app_secret: str, api_path: str, parameters: Mapping[str, Any]
) -> str:
    """
    HMAC-SHA256 signature for a Lazada API call.

    Steps:
    1. Sort parameters by key (alphabetically)
    2. Join: api_path + key1 + value1 + key2 + value2 + ...
    3. HMAC-SHA256 with app_secret as the key
    4. Uppercase hex digest
    """
    string_to_sign = signature_base_string(api_path, parameters)

    signature = hmac.new(
        key=app_secret.encode("utf-8"),
        msg=string_to_sign.encode("utf-8"),
        digestmod=hashlib.sha256,
    )

    return signature.hexdigest().upper()


def build_url(base_url: str, api_name: str, common_params: Mapping[str, Any]) -> str:
    """Assemble the dispatch URL.

    The query keeps the insertion order of ``common_params`` and is not
    percent-encoded; only the signature base string is sorted.
    """
    if base_url.endswith("/"):
        base_url = base_url[:-1]

    query_string = "&".join(
        f"{key}={stringify_value(value)}" for key, value in common_params.items()
    )
    return f"{base_url}{api_name}?{query_string}"
