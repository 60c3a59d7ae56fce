"""Pterodactyl client API wrapper: sends whitelist console commands."""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from ..core.config import Settings
from ..core.models_io import WhitelistAction, format_command

logger = logging.getLogger("uvicorn.error")

ACCEPT_HEADER = "application/vnd.pterodactyl.v1+json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class PterodactylError(Exception):
    """Base class for failures talking to the panel."""


class InvalidActionError(PterodactylError, ValueError):
    """Raised for a whitelist action other than add/remove."""


class DownstreamError(PterodactylError):
    """Raised when the panel could not be reached or its reply not read."""


class PterodactylClient:
    """Send console commands to one server through the panel's client API.

    A single instance is shared by all request handlers; the underlying
    `requests.Session` pools connections and is only read after construction.
    """

    def __init__(
        self,
        api_url: str,
        server_id: str,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_url = api_url
        self._server_id = server_id
        self._api_key = api_key
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "PterodactylClient":
        return cls(settings.api_url, settings.server_id, settings.api_key, **kwargs)

    @property
    def command_endpoint(self) -> str:
        return f"{self._api_url}/api/client/servers/{self._server_id}/command"

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": ACCEPT_HEADER,
            "Content-Type": FORM_CONTENT_TYPE,
        }

    def update_whitelist(self, username: str, action: str) -> None:
        """
        Add or remove `username` on the server whitelist.

        Args:
            username: Player name, passed to the console as-is
            action: "add" or "remove"

        Raises:
            InvalidActionError: action is not add/remove (no request is sent)
            DownstreamError: transport failure or unreadable response body

        Any completed round trip counts as success. A 412 only means the
        game server is probably offline and is logged as a warning.
        """
        try:
            whitelist_action = WhitelistAction(action)
        except ValueError:
            raise InvalidActionError(f"Illegal whitelist operation '{action}'") from None

        endpoint = self.command_endpoint
        logger.info(
            "Whitelisting user url=%s action=%s username=%s",
            endpoint, whitelist_action.value, username,
        )

        # Spaces stay literal; reserved characters are escaped so the
        # username cannot add or alter form fields
        body = f"command={quote(format_command(whitelist_action, username), safe=' ')}"

        try:
            response = self._session.post(endpoint, data=body.encode("utf-8"), headers=self._headers())
            text = response.text
        except requests.RequestException as e:
            logger.error("Failed to send whitelist command url=%s error=%s", endpoint, e)
            raise DownstreamError(str(e)) from e

        if response.status_code == 412:
            logger.warning("Server might not be online. Status code is 412.")

        logger.debug("Response: %s", text)

    def close(self) -> None:
        self._session.close()
