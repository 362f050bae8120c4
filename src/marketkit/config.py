"""marketkit.toml loading and defaults."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli
import tomli_w

from marketkit.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "marketkit.toml"

NOTIFY_BACKENDS = ("auto", "terminal-notifier", "osascript", "notify-send")

DEFAULT_TITLE = "Claude Code"
DEFAULT_MESSAGE = "Claude needs your attention"
DEFAULT_TIMEOUT = 10


@dataclass(frozen=True)
class NotifyConfig:
    backend: str = "auto"
    title: str = DEFAULT_TITLE
    message: str = DEFAULT_MESSAGE
    timeout: int = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class CheckConfig:
    strict: bool = False


@dataclass(frozen=True)
class MarketkitConfig:
    """Settings from marketkit.toml. Every field has a default."""

    notify: NotifyConfig = field(default_factory=NotifyConfig)
    check: CheckConfig = field(default_factory=CheckConfig)


def _require_type(section: str, key: str, value: Any, expected: type) -> Any:
    # bool is an int subclass; reject it where an int is wanted
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(
            f"{CONFIG_FILE}: [{section}] {key} must be {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _parse_notify(data: dict[str, Any]) -> NotifyConfig:
    defaults = NotifyConfig()
    backend = _require_type("notify", "backend", data.get("backend", defaults.backend), str)
    if backend not in NOTIFY_BACKENDS:
        raise ConfigError(
            f"{CONFIG_FILE}: [notify] backend '{backend}' is not one of {', '.join(NOTIFY_BACKENDS)}"
        )
    timeout = _require_type("notify", "timeout", data.get("timeout", defaults.timeout), int)
    if timeout <= 0:
        raise ConfigError(f"{CONFIG_FILE}: [notify] timeout must be positive: {timeout}")

    return NotifyConfig(
        backend=backend,
        title=_require_type("notify", "title", data.get("title", defaults.title), str),
        message=_require_type("notify", "message", data.get("message", defaults.message), str),
        timeout=timeout,
    )


def parse_config(data: dict[str, Any]) -> MarketkitConfig:
    """Build a config from a parsed TOML document."""
    notify_data = data.get("notify", {})
    check_data = data.get("check", {})
    if not isinstance(notify_data, dict) or not isinstance(check_data, dict):
        raise ConfigError(f"{CONFIG_FILE}: [notify] and [check] must be tables")

    strict = _require_type("check", "strict", check_data.get("strict", False), bool)
    return MarketkitConfig(notify=_parse_notify(notify_data), check=CheckConfig(strict=strict))


def apply_env_overrides(config: MarketkitConfig) -> MarketkitConfig:
    """MARKETKIT_NOTIFY_BACKEND overrides [notify] backend."""
    backend = os.environ.get("MARKETKIT_NOTIFY_BACKEND")
    if not backend:
        return config
    if backend not in NOTIFY_BACKENDS:
        raise ConfigError(
            f"MARKETKIT_NOTIFY_BACKEND '{backend}' is not one of {', '.join(NOTIFY_BACKENDS)}"
        )
    notify = NotifyConfig(
        backend=backend,
        title=config.notify.title,
        message=config.notify.message,
        timeout=config.notify.timeout,
    )
    return MarketkitConfig(notify=notify, check=config.check)


def load_config(config_path: Path | None) -> MarketkitConfig:
    """Load marketkit.toml.

    Returns defaults if config_path is None or the file doesn't exist.
    """
    if config_path is None or not config_path.exists():
        logger.debug("No config file, using defaults")
        return apply_env_overrides(MarketkitConfig())

    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return apply_env_overrides(parse_config(data))


def config_to_dict(config: MarketkitConfig) -> dict[str, Any]:
    return {
        "notify": {
            "backend": config.notify.backend,
            "title": config.notify.title,
            "message": config.notify.message,
            "timeout": config.notify.timeout,
        },
        "check": {"strict": config.check.strict},
    }


def save_config(config_path: Path, config: MarketkitConfig) -> None:
    """Write marketkit.toml."""
    with open(config_path, "wb") as f:
        tomli_w.dump(config_to_dict(config), f)
