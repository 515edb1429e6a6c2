"""YAML configuration loader with environment variable overrides.

# ─── CONFIGURATION HIERARCHY ───────────────────────────────────────────
#
# Configuration is loaded in layers (later layers override earlier):
#
#   1. Settings defaults   : production values baked into the code
#   2. config/config.yaml  : static defaults checked into the repo
#   3. .env / environment  : set at deploy time
#
# Only fields the environment, .env or the caller actually provided
# (Settings.model_fields_set) count as overrides, so an unset variable
# never clobbers a YAML value while one set to the default still wins.
#
# The _deep_merge helper does recursive dict merging:
#   base = {"ddex": {"deal_profile": "full"}}
#   overrides = {"ddex": {"sender_party_id": "DPID:X"}}
#   result = {"ddex": {"deal_profile": "full", "sender_party_id": "DPID:X"}}
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from ddex_ern.config.settings import Settings
from ddex_ern.models.options import DocumentOptions
from ddex_ern.utils.errors import ConfigurationError


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.
        settings: Pre-built settings; read from ``.env`` and the
            environment when omitted.

    Returns:
        Fully resolved configuration dictionary with ``app``, ``ddex``,
        ``auth`` and ``logging`` sections.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            try:
                yaml_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(
                    message=f"Invalid YAML in {config_path}: {exc}",
                ) from exc
    else:
        yaml_config = {}

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(message=f"{config_path} must contain a mapping")

    settings = settings or Settings()
    config = _sections(Settings.model_construct())
    _deep_merge(config, yaml_config)
    _deep_merge(config, _sections(settings, settings.model_fields_set))
    return config


def document_options(config: dict[str, Any]) -> DocumentOptions:
    """Build :class:`DocumentOptions` from the ``ddex`` config section."""
    try:
        return DocumentOptions(**config.get("ddex", {}))
    except (TypeError, ValidationError) as exc:
        raise ConfigurationError(
            message=f"Invalid ddex configuration: {exc}",
            field_name="ddex",
        ) from exc


# Settings field -> (config section, key).
_FIELD_PATHS: dict[str, tuple[str, str]] = {
    "app_host": ("app", "host"),
    "app_port": ("app", "port"),
    "app_env": ("app", "env"),
    "cors_origins": ("app", "cors_origins"),
    "sender_party_id": ("ddex", "sender_party_id"),
    "recipient_party_id": ("ddex", "recipient_party_id"),
    "recipient_party_name": ("ddex", "recipient_party_name"),
    "deal_profile": ("ddex", "deal_profile"),
    "message_id_prefix": ("ddex", "message_id_prefix"),
    "api_keys": ("auth", "api_keys"),
    "log_level": ("logging", "level"),
}


def _sections(settings: Settings, fields: Iterable[str] | None = None) -> dict:
    """Lay *settings* out as config sections, limited to *fields* if given."""
    names = _FIELD_PATHS if fields is None else [f for f in fields if f in _FIELD_PATHS]
    result: dict = {}
    for name in names:
        section, key = _FIELD_PATHS[name]
        result.setdefault(section, {})[key] = _field_value(settings, name)
    return result


def _field_value(settings: Settings, name: str) -> Any:
    if name == "api_keys":
        return settings.get_api_keys()
    if name == "cors_origins":
        return settings.get_cors_origins()
    if name == "deal_profile":
        return settings.deal_profile.value
    return getattr(settings, name)


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
