"""Core configuration and Pydantic models.

Contains:
- config.py: settings loaded from the environment at startup
- models_io.py: response schema and whitelist command helpers
"""
