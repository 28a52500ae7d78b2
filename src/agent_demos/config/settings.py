"""Configuration loader and merger.

Settings are read from YAML files (deep-merged in order), then an optional
``environments`` block selected by ``AGENT_DEMOS_ENV``, then plain env vars.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import yaml

from agent_demos.config.schema import SETTINGS_SCHEMA, validate_schema

LOG = logging.getLogger(__name__)

DEFAULT_MODEL = "sonnet"
DEFAULT_OUTPUT_DIR = os.path.join("agent", "custom_scripts")

ENV_KEYS = {
    "model": "AGENT_DEMOS_MODEL",
    "cwd": "AGENT_DEMOS_CWD",
    "output_dir": "AGENT_DEMOS_OUTPUT_DIR",
    "permission_mode": "AGENT_DEMOS_PERMISSION_MODE",
    "log_level": "AGENT_DEMOS_LOG_LEVEL",
    "transcript_path": "AGENT_DEMOS_TRANSCRIPT",
}


def deep_merge(base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in (incoming or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid yaml: {path}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"invalid yaml mapping: {path}")
    return data


def load_configs(paths: Iterable[str]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for path in paths:
        if not path:
            continue
        if not os.path.exists(path):
            LOG.debug("config file not found, skipping: %s", path)
            continue
        merged = deep_merge(merged, load_yaml_file(path))
    return merged


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply multi-environment overrides.

    If config has:
      environments:
        ci: { ... }
        local: { ... }
    then AGENT_DEMOS_ENV selects and deep-merges into base config.
    """
    env = (os.getenv("AGENT_DEMOS_ENV") or "").strip()
    envs = config.get("environments") if isinstance(config, dict) else None
    if not env or not isinstance(envs, dict) or env not in envs:
        return config
    return deep_merge(config, envs.get(env) or {})


def load_runtime_env() -> Dict[str, Any]:
    return {key: os.getenv(env_name) for key, env_name in ENV_KEYS.items()}


def merge_env_config(config: Dict[str, Any], env_cfg: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(config)
    for key, value in env_cfg.items():
        if value:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class DemoOverrides:
    model: Optional[str] = None
    max_turns: Optional[int] = None
    allowed_tools: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class AppSettings:
    model: str = DEFAULT_MODEL
    cwd: Path = field(default_factory=Path.cwd)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    permission_mode: Optional[str] = None
    log_level: str = "WARNING"
    transcript_path: Optional[Path] = None
    demos: Mapping[str, DemoOverrides] = field(default_factory=dict)

    @property
    def output_root(self) -> Path:
        """Output directory resolved against the working directory."""
        if self.output_dir.is_absolute():
            return self.output_dir
        return self.cwd / self.output_dir

    def overrides_for(self, demo: str) -> DemoOverrides:
        return self.demos.get(demo) or DemoOverrides()

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "AppSettings":
        validate_schema(data, SETTINGS_SCHEMA)
        demos = {}
        for name, raw in (data.get("demos") or {}).items():
            tools = raw.get("allowed_tools")
            demos[name] = DemoOverrides(
                model=raw.get("model"),
                max_turns=raw.get("max_turns"),
                allowed_tools=tuple(tools) if tools is not None else None,
            )
        cwd = Path(data["cwd"]).expanduser().resolve() if data.get("cwd") else Path.cwd()
        transcript = data.get("transcript_path")
        return cls(
            model=data.get("model") or DEFAULT_MODEL,
            cwd=cwd,
            output_dir=Path(data.get("output_dir") or DEFAULT_OUTPUT_DIR),
            permission_mode=data.get("permission_mode"),
            log_level=str(data.get("log_level") or "WARNING").upper(),
            transcript_path=Path(transcript) if transcript else None,
            demos=demos,
        )

    @classmethod
    def load(cls, paths: Iterable[str]) -> "AppSettings":
        cfg = apply_env_overrides(load_configs(paths))
        cfg.pop("environments", None)
        cfg = merge_env_config(cfg, load_runtime_env())
        return cls.from_mapping(cfg)


def ensure_api_key_env() -> None:
    """Copy ANTHROPIC_AUTH_TOKEN into ANTHROPIC_API_KEY when only the token is set."""
    api_key = os.getenv("ANTHROPIC_API_KEY")
    auth_token = os.getenv("ANTHROPIC_AUTH_TOKEN")

    if not api_key and auth_token:
        os.environ["ANTHROPIC_API_KEY"] = auth_token
        LOG.debug("copied ANTHROPIC_AUTH_TOKEN to ANTHROPIC_API_KEY")

    base_url = os.getenv("ANTHROPIC_BASE_URL")
    if base_url:
        LOG.debug("API base url: %s", base_url)


def build_sdk_env() -> Dict[str, str]:
    """Env vars handed to the SDK subprocess; empty values are left out."""
    api_env = {
        "ANTHROPIC_API_KEY": os.getenv("ANTHROPIC_API_KEY") or os.getenv("ANTHROPIC_AUTH_TOKEN", ""),
        "ANTHROPIC_BASE_URL": os.getenv("ANTHROPIC_BASE_URL", ""),
    }
    return {k: v for k, v in api_env.items() if v}
