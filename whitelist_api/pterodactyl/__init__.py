"""Pterodactyl client API access.

The `client.py` module sends whitelist console commands to the panel.
"""

from .client import DownstreamError, InvalidActionError, PterodactylClient, PterodactylError

__all__ = ["DownstreamError", "InvalidActionError", "PterodactylClient", "PterodactylError"]
