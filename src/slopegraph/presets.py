"""Named slopegraph presets persisted as JSON (platformdirs).

A preset file holds any number of named SlopegraphConfig dicts plus the name
of the default one:

    {
      "schema_version": 1,
      "default": "gray-lines",
      "presets": {"gray-lines": {"col_lines": "gray", "decimals": 1}}
    }

Every preset is checked field by field when the file is loaded and again when
a preset is stored, so a bad limit, decimals value or line type is reported
against the preset name instead of surfacing later in a render. Presets that
fail the check are dropped with a warning; an unreadable file, invalid JSON or
an unknown schema version leaves the store empty.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir

from slopegraph.config import SlopegraphConfig
from slopegraph.errors import InvalidInputError, InvalidStyleError
from slopegraph.style import check_decimals, normalize_line_type
from slopegraph.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when the on-disk layout changes incompatibly.
SCHEMA_VERSION: int = 1

DEFAULT_FILENAME = "slopegraph_presets.json"


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _check_limits(name: str, value: Any) -> None:
    if value is None:
        return
    if len(value) != 2 or not all(math.isfinite(v) for v in value):
        raise InvalidInputError(f"{name} must be two finite numbers, got {value!r}")
    if value[0] == value[1]:
        raise InvalidInputError(f"{name} must span a non-empty range, got {value!r}")


def validate_config(config: SlopegraphConfig) -> SlopegraphConfig:
    """Check the fields of a config that do not depend on the table.

    Style vector lengths are checked at render time, once the number of
    observations is known; here every entry must be usable and vectors must
    not be empty.

    Returns:
        The same config, for chaining.

    Raises:
        InvalidInputError: For bad axis limits.
        InvalidStyleError: For bad decimals, line types, widths, font codes,
            offsets or empty style vectors.
    """
    _check_limits("xlim", config.xlim)
    _check_limits("ylim", config.ylim)
    check_decimals(config.decimals)

    for name in ("col_lines", "col_lab", "col_num", "lty", "lwd"):
        value = getattr(config, name)
        if value is not None and isinstance(value, (list, tuple)) and not value:
            raise InvalidStyleError(f"{name} must not be empty")
    for lty in _as_list(config.lty):
        normalize_line_type(lty)
    for lwd in _as_list(config.lwd):
        if isinstance(lwd, bool) or not isinstance(lwd, (int, float)) or lwd < 0:
            raise InvalidStyleError(f"lwd entries must be non-negative numbers, got {lwd!r}")
    for name in ("font_lab", "font_num"):
        if getattr(config, name) not in (1, 2, 3, 4):
            raise InvalidStyleError(f"{name} must be 1, 2, 3 or 4, got {getattr(config, name)!r}")
    for name in ("offset_x", "offset_lab", "cex_lab", "cex_num"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise InvalidStyleError(f"{name} must be a non-negative number, got {value!r}")
    return config


class SlopegraphPresets:
    """
    Named SlopegraphConfig presets backed by one JSON file.

    Attributes:
        path: File the presets are loaded from and saved to.
        default_name: Name of the preset returned by get_default(), if any.
    """

    def __init__(
        self,
        *,
        path: Path,
        presets: Optional[dict[str, SlopegraphConfig]] = None,
        default_name: Optional[str] = None,
    ) -> None:
        self.path = path
        self._presets: dict[str, SlopegraphConfig] = dict(presets or {})
        self.default_name = default_name if default_name in self._presets else None

    @staticmethod
    def default_path(app_name: str = "slopegraph", filename: str = DEFAULT_FILENAME) -> Path:
        """
        OS-appropriate per-user preset file. Nothing is created on disk.

        macOS:   ~/Library/Application Support/slopegraph/slopegraph_presets.json
        Linux:   ~/.config/slopegraph/slopegraph_presets.json
        """
        return Path(user_config_dir(app_name)) / filename

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "SlopegraphPresets":
        """
        Load presets from ``path`` (default: default_path()).

        A missing file gives an empty store silently; an unreadable file,
        invalid JSON, a non-object document or a schema_version other than
        SCHEMA_VERSION gives an empty store with a warning.
        """
        path = path or cls.default_path()
        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"No slopegraph presets at {path}")
            return cls(path=path)
        except json.JSONDecodeError as e:
            logger.warning(f"Slopegraph presets at {path} are not valid JSON: {e}, ignoring file")
            return cls(path=path)
        except OSError as e:
            logger.warning(f"Error reading slopegraph presets from {path}: {e}, ignoring file")
            return cls(path=path)

        if not isinstance(parsed, dict):
            logger.warning(f"Slopegraph presets at {path} are not a JSON object, ignoring file")
            return cls(path=path)

        try:
            version = int(parsed.get("schema_version", -1))
        except (TypeError, ValueError):
            logger.warning(
                f"Slopegraph presets at {path} have an unreadable schema_version "
                f"{parsed.get('schema_version')!r}, ignoring file"
            )
            return cls(path=path)
        if version != SCHEMA_VERSION:
            logger.warning(
                f"Slopegraph presets schema version mismatch at {path}: "
                f"loaded={version}, expected={SCHEMA_VERSION}, ignoring file"
            )
            return cls(path=path)

        raw_presets = parsed.get("presets", {})
        if not isinstance(raw_presets, dict):
            logger.warning(f"'presets' in {path} is not an object, ignoring it")
            raw_presets = {}

        presets: dict[str, SlopegraphConfig] = {}
        for name, raw in raw_presets.items():
            try:
                if not isinstance(raw, dict):
                    raise TypeError("preset is not an object")
                presets[str(name)] = validate_config(SlopegraphConfig.from_dict(raw))
            except (TypeError, ValueError) as e:
                logger.warning(f"Dropping invalid slopegraph preset {name!r} from {path}: {e}")

        default_name = parsed.get("default")
        if default_name is not None and default_name not in presets:
            logger.warning(f"Default preset {default_name!r} not found in {path}")
        return cls(path=path, presets=presets, default_name=default_name)

    def save(self) -> None:
        """Write all presets to ``path``, creating its directory if needed."""
        payload = {
            "schema_version": SCHEMA_VERSION,
            "default": self.default_name,
            "presets": {name: cfg.to_dict() for name, cfg in self._presets.items()},
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            logger.info(f"Saved {len(self._presets)} slopegraph presets to {self.path}")
        except Exception as e:
            logger.error(f"Error saving slopegraph presets to {self.path}: {e}")
            raise

    def names(self) -> list[str]:
        return sorted(self._presets)

    def get(self, name: str) -> SlopegraphConfig:
        """Return the named preset.

        Raises:
            KeyError: If there is no preset with that name.
        """
        return self._presets[name]

    def put(self, name: str, config: SlopegraphConfig, *, make_default: bool = False) -> None:
        """Validate and store a preset (call save() to persist).

        Panel callables are not persisted.
        """
        self._presets[name] = validate_config(config)
        if make_default:
            self.default_name = name

    def remove(self, name: str) -> None:
        del self._presets[name]
        if self.default_name == name:
            self.default_name = None

    def get_default(self) -> SlopegraphConfig:
        """The default preset, or a plain SlopegraphConfig when none is set."""
        if self.default_name is None:
            return SlopegraphConfig()
        return self._presets[self.default_name]
