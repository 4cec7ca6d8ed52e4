"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "pkgview/settings.schema.json",
    "type": "object",
    "required": ["schema", "ui"],
    "properties": {
        "schema": {"const": "pkgview/settings@1"},
        "ui": {
            "type": "object",
            "properties": {
                "default_to_tile_view_for_local_source": {"type": "boolean"},
                "default_to_tile_view_for_remote_source": {"type": "boolean"},
                "show_console_output": {"type": "boolean"},
                "theme": {"type": "string", "enum": ["light", "dark", "system"]},
            },
            "additionalProperties": True,
        },
        "export_directory": {"type": ["string", "null"]},
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "pkgview/settings@1",
    "ui": {
        "default_to_tile_view_for_local_source": False,
        "default_to_tile_view_for_remote_source": True,
        "show_console_output": False,
        "theme": "system",
    },
    "export_directory": None,
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "ui" and isinstance(value, dict):
                merged.setdefault("ui", {}).update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
