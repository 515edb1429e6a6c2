"""Configuration module — exports Settings, load_config and document_options."""

from ddex_ern.config.loader import document_options, load_config
from ddex_ern.config.settings import Settings

__all__ = ["Settings", "document_options", "load_config"]
