"""Options surface for kbdplus.

No options are defined yet. The surface exists so callers can pass a
mapping today (``kbd_plus({"anything": True})``) and keep working when
options are added: unknown keys are silently ignored.

Usage:
    from kbdplus.config import KbdConfig, resolve_config

    config = resolve_config(None)              # defaults
    config = resolve_config({"unknown": 1})    # unknown key ignored
    config = KbdConfig.from_dict({})

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from kbdplus.errors import ConfigError


@dataclass(frozen=True, slots=True)
class KbdConfig:
    """Immutable scanner configuration.

    Frozen dataclass, safe to share across threads.

    """

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> KbdConfig:
        """Create KbdConfig from a mapping.

        Only keys that are KbdConfig fields are used; unknown keys are
        silently ignored.

        Example:
            >>> KbdConfig.from_dict({"unknown_key": "ignored"})
            KbdConfig()

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: KbdConfig = KbdConfig()


def resolve_config(options: KbdConfig | Mapping[str, Any] | None) -> KbdConfig:
    """Normalize an options value into a KbdConfig.

    Args:
        options: None, a mapping of option names, or a KbdConfig.

    Returns:
        KbdConfig instance (the shared default for None or an empty mapping).

    Raises:
        ConfigError: If options is of any other type.

    """
    if options is None:
        return DEFAULT_CONFIG
    if isinstance(options, KbdConfig):
        return options
    if isinstance(options, Mapping):
        if not options:
            return DEFAULT_CONFIG
        return KbdConfig.from_dict(options)
    msg = f"options must be a mapping or KbdConfig, got {type(options).__name__}"
    raise ConfigError(msg)


__all__ = [
    "DEFAULT_CONFIG",
    "KbdConfig",
    "resolve_config",
]
