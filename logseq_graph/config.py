"""Configuration loading from an optional YAML file and the environment."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional
import httpx
import yaml

from logseq_graph.constants import (
    CONFIG_PATH,
    DEFAULT_API_URL,
    DEFAULT_PORT,
    DEFAULT_TRANSPORT,
    LOG_LEVEL,
    TRANSPORTS,
)
from logseq_graph.data_models import LogseqSettings
from logseq_graph.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> settings key
ENV_KEYS = {
    "LOGSEQ_API_URL": "api_url",
    "LOGSEQ_API_TOKEN": "api_token",
    "TRANSPORT": "transport",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
}

SETUP_INSTRUCTIONS = (
    "LOGSEQ_API_TOKEN environment variable is required.\n\n"
    "Setup steps:\n"
    "  1. Open Logseq > Settings > Features > Enable 'HTTP APIs server'\n"
    "  2. Click the API button > Start server\n"
    "  3. Generate a token in the API panel > Authorization tokens\n"
    "  4. Set LOGSEQ_API_TOKEN=<your-token>\n"
)


def _read_config_file(config_path: Path) -> dict[str, Any]:
    """Read the optional YAML settings file.

    Returns:
        The parsed mapping, or an empty dict when the file does not exist.

    Raises:
        ConfigurationError: If the file exists but is not a YAML mapping.
    """
    if not config_path.exists():
        return {}

    try:
        raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config file {config_path} contains invalid YAML: {exc}") from exc

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping of settings")

    unknown = set(raw_config) - set(ENV_KEYS.values())
    if unknown:
        raise ConfigurationError(
            f"Config file {config_path} has unknown keys: {', '.join(sorted(unknown))}"
        )

    return raw_config


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"PORT must be an integer, got '{value}'") from exc
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT must be between 1 and 65535, got {port}")
    return port


def _parse_api_url(value: Any) -> str:
    api_url = str(value).strip().rstrip("/")
    try:
        url = httpx.URL(api_url)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"LOGSEQ_API_URL is not a valid URL: '{api_url}'") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"LOGSEQ_API_URL must be an http(s) URL such as {DEFAULT_API_URL}, got '{api_url}'"
        )
    return api_url


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
) -> LogseqSettings:
    """Load and validate server settings.

    Values from the YAML file (``logseq.yaml`` at the repository root, or the
    file named by ``LOGSEQ_CONFIG``) are overridden by environment variables.

    Args:
        environ: Environment mapping. Defaults to ``os.environ``.
        config_path: Explicit path to the YAML file.

    Returns:
        A fully populated :class:`LogseqSettings`.

    Raises:
        ConfigurationError: If the token is missing or any value is invalid.
    """
    env = os.environ if environ is None else environ
    if config_path is None:
        config_path = Path(env["LOGSEQ_CONFIG"]).expanduser() if env.get("LOGSEQ_CONFIG") else CONFIG_PATH

    raw = _read_config_file(config_path)
    for env_key, setting in ENV_KEYS.items():
        value = env.get(env_key)
        if value is not None and value.strip():
            raw[setting] = value.strip()

    token = str(raw.get("api_token") or "").strip()
    if not token:
        raise ConfigurationError(SETUP_INSTRUCTIONS)

    transport = str(raw.get("transport") or DEFAULT_TRANSPORT).strip().lower()
    if transport not in TRANSPORTS:
        raise ConfigurationError(
            f"TRANSPORT must be one of: {', '.join(TRANSPORTS)}. Got: '{transport}'"
        )

    log_level = str(raw.get("log_level") or LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"LOG_LEVEL '{log_level}' is not a valid logging level")

    return LogseqSettings(
        api_url=_parse_api_url(raw.get("api_url") or DEFAULT_API_URL),
        api_token=token,
        transport=transport,
        port=_parse_port(DEFAULT_PORT if raw.get("port") is None else raw["port"]),
        log_level=log_level,
    )


@lru_cache(maxsize=1)
def get_settings() -> LogseqSettings:
    """Return process-wide settings, loaded once on first use."""
    settings = load_settings()
    logger.debug("Loaded settings: %s", settings.as_payload())
    return settings
