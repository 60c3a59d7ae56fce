"""Route groups for the whitelist API.

- whitelist: add/remove a username via the Pterodactyl console
"""
