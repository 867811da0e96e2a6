"""
Configuration management for ipatalk.

Default settings ship with the package in ``data/default_settings.json``.
They can be overridden by a user JSON file, located either through the
``IPATALK_CONFIG`` environment variable or by an ``ipatalk_settings.json``
in one of the standard search locations (see
:func:`ipatalk.utils.paths.find_data_file`).  This module provides a
simple API to load and merge configuration data.

The transliteration engine itself reads no global settings: callers
pass a :class:`TalkOptions` (or a plain ``{"tones": ...}`` mapping) to
:func:`ipatalk.transliterate`.  :meth:`TalkOptions.from_config` builds
one from the ``talk`` section of an :class:`AppConfig`.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .utils.paths import find_data_file

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_FILE: Path = Path(__file__).resolve().parent / "data" / "default_settings.json"
USER_CONFIG_NAME = "ipatalk_settings.json"
CONFIG_ENV_VAR = "IPATALK_CONFIG"


@dataclass
class AppConfig:
    """In‑memory representation of the application configuration.

    Keys provided by the user that the package does not know about are
    preserved in ``data`` untouched.
    """

    data: Dict[str, Any] = field(default_factory=dict)

    def get(self, *keys: str, default: Optional[Any] = None) -> Any:
        """Retrieve a nested configuration value safely.

        Usage::

            config = load_config()
            size = config.get("gui", "font_size", default=16)

        :param keys: Sequence of keys describing a path in the config.
        :param default: Value returned when the path does not exist.
        :return: The configuration value or ``default``.
        """

        current: Any = self.data
        for key in keys:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def merge(self, other: Dict[str, Any]) -> None:
        """Merge another dictionary into this configuration.

        When keys exist in both ``self.data`` and ``other``, values from
        ``other`` take precedence.  Nested dictionaries are merged
        recursively.
        """

        def _merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
            result = dict(a)
            for k, v in b.items():
                if isinstance(v, dict) and isinstance(a.get(k), dict):
                    result[k] = _merge(a[k], v)
                else:
                    result[k] = v
            return result

        self.data = _merge(self.data, other)


@dataclass(frozen=True)
class TalkOptions:
    """Options for a single transliteration call.

    :param tones: When False, tone marks are still consumed from the
        input but never written onto a vowel.
    """

    tones: bool = True

    @classmethod
    def from_config(cls, config: AppConfig) -> "TalkOptions":
        return cls(tones=bool(config.get("talk", "tones", default=True)))

    @classmethod
    def coerce(cls, options: Union["TalkOptions", Mapping[str, Any], None]) -> "TalkOptions":
        """Accept ``None``, a :class:`TalkOptions` or a mapping of options."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = set(options) - known
            if unknown:
                raise ValueError(f"unknown option(s): {', '.join(sorted(unknown))}")
            return cls(**{k: bool(v) for k, v in options.items()})
        raise TypeError(f"options must be TalkOptions or a mapping, not {type(options).__name__}")


def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(user_config_path: Optional[os.PathLike] = None) -> AppConfig:
    """Load configuration from the default and optional user files.

    If ``user_config_path`` is given it must exist.  Without it, an
    ``ipatalk_settings.json`` found in the standard search locations is
    used when present.

    :param user_config_path: Path to an optional JSON override file.
    :return: A fully merged :class:`AppConfig`.
    """

    cfg = AppConfig(_read_json(DEFAULT_CONFIG_FILE))
    if user_config_path:
        user_path = Path(user_config_path)
        if not user_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {user_path}")
    else:
        try:
            user_path = find_data_file(USER_CONFIG_NAME)
        except FileNotFoundError:
            return cfg
    logger.debug("Loading configuration overrides from %s", user_path)
    cfg.merge(_read_json(user_path))
    return cfg


def get_app_config() -> AppConfig:
    """Convenience accessor to obtain the application configuration.

    The loader honours the ``IPATALK_CONFIG`` environment variable.  If
    set, this variable should point to a JSON file containing user
    specific configuration overrides.
    """

    return load_config(os.environ.get(CONFIG_ENV_VAR))
