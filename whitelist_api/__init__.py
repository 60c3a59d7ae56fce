"""HTTP front-end that adds/removes users on a Pterodactyl game server whitelist."""

__version__ = "1.0.0"
