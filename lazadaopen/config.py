"""Settings for the Lazada client, read from the environment or a .env file."""

import os
from typing import Optional

from dotenv import load_dotenv

from .client import LazadaClient
from .exceptions import ConfigurationError

REGIONS = {
    "VN": "https://api.lazada.vn/rest",
    "SG": "https://api.lazada.sg/rest",
    "MY": "https://api.lazada.com.my/rest",
    "TH": "https://api.lazada.co.th/rest",
    "PH": "https://api.lazada.com.ph/rest",
    "ID": "https://api.lazada.co.id/rest",
}

DEFAULT_REGION = "SG"


class LazadaSettings:
    """Credentials and endpoint for one Lazada seller app."""

    def __init__(
        self,
        app_key: str,
        app_secret: str,
        server_url: str = REGIONS[DEFAULT_REGION],
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ):
        self.app_key = app_key
        self.app_secret = app_secret
        self.server_url = server_url
        self.access_token = access_token
        self.refresh_token = refresh_token

    def create_client(self) -> LazadaClient:
        return LazadaClient(self.server_url, self.app_key, self.app_secret)


def load_settings(
    prefix: str = "LAZADA", env_file: Optional[str] = None
) -> LazadaSettings:
    """Load settings from ``{prefix}_*`` environment variables.

    ``{prefix}_SERVER_URL`` wins over ``{prefix}_REGION``; with neither set
    the Singapore gateway is used.

    Raises:
        ConfigurationError: if the app key or secret is missing, or the
            region is unknown.
    """
    load_dotenv(env_file)

    app_key = os.getenv(f"{prefix}_APP_KEY")
    app_secret = os.getenv(f"{prefix}_APP_SECRET")

    if not app_key or not app_secret:
        raise ConfigurationError(
            f"Missing {prefix}_APP_KEY or {prefix}_APP_SECRET in environment"
        )

    server_url = os.getenv(f"{prefix}_SERVER_URL")
    if not server_url:
        region = os.getenv(f"{prefix}_REGION", DEFAULT_REGION).upper()
        if region not in REGIONS:
            raise ConfigurationError(
                f"Unknown {prefix}_REGION {region!r}, expected one of {sorted(REGIONS)}"
            )
        server_url = REGIONS[region]

    return LazadaSettings(
        app_key=app_key,
        app_secret=app_secret,
        server_url=server_url,
        access_token=os.getenv(f"{prefix}_ACCESS_TOKEN") or None,
        refresh_token=os.getenv(f"{prefix}_REFRESH_TOKEN") or None,
    )
