"""Settings schema and validation."""

from typing import Any, Dict

from jsonschema import validate
from jsonschema.exceptions import ValidationError

DEMO_OVERRIDE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "model": {"type": "string", "minLength": 1},
        "max_turns": {"type": "integer", "minimum": 1},
        "allowed_tools": {"type": "array", "items": {"type": "string", "minLength": 1}},
    },
    "additionalProperties": False,
}

SETTINGS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "model": {"type": "string", "minLength": 1},
        "cwd": {"type": "string"},
        "output_dir": {"type": "string", "minLength": 1},
        "permission_mode": {
            "type": ["string", "null"],
            "enum": ["default", "acceptEdits", "plan", "bypassPermissions", None],
        },
        "log_level": {"type": "string"},
        "transcript_path": {"type": ["string", "null"]},
        "demos": {
            "type": "object",
            "additionalProperties": DEMO_OVERRIDE_SCHEMA,
        },
        "environments": {"type": "object"},
    },
}


def validate_schema(payload: Dict[str, Any], schema: Dict[str, Any]) -> None:
    try:
        validate(instance=payload, schema=schema)
    except ValidationError as exc:
        path = ".".join([str(p) for p in exc.path]) if exc.path else "<root>"
        raise ValueError(f"schema validation failed at {path}: {exc.message}") from exc
