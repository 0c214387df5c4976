"""Configuration management for lovense-cloud.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides for the Lovense token and uid.
"""

from lovense_cloud.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
