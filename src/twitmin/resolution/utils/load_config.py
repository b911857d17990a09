# src/twitmin/resolution/utils/load_config.py

"""Load JSON data files (dictionaries, word lists) from a <data/> directory.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return the object returned by `validator` (dict input required)

Results are cached per (path, mtime, mode, validator) so the alternatives
dictionary is parsed once per process unless the file changes on disk.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except Exception:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
DATA_DIR_ENV_VARS = ("DATA_DIR", "TWITMIN_DATA_DIR")
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing or validation fails for a data file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't have the expected top-level type."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, mode, encoding, allow_comments, validator
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool, object], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory cache (pytest, hot reload of dictionaries)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """List 'data' directories walking up from `start` (defaults to this file)."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    candidates = _candidate_data_dirs(start)
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in candidates)
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Map `file` to <data_dir>/<file>.json, refusing paths that escape the data dir."""
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = base_dir.resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json(path: Path, *, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: None = ...,
    allow_comments: bool = False,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["validated_dict"] = "validated_dict",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = ...,
    allow_comments: bool = False,
) -> Any: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], Any] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, validate by mode, and cache results."""
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _resolve_path(file, base_dir)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments, validator)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    data = _read_json(path, encoding=encoding, allow_comments=allow_comments)

    if mode == "raw":
        result: Any = data
    else:
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is None:
            result = data
        else:
            try:
                result = validator(data)
            except (TypeError, ValueError) as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily point DATA_DIR at `path` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("DATA_DIR")
        os.environ["DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("DATA_DIR", None)
        else:
            os.environ["DATA_DIR"] = self._old
        clear_config_cache()
