"""core/tuning.py — Runtime-loaded tuning constants.

Reads ``core/data/tuning.toml`` once at startup so speeds, frame rate,
window size and asset paths can be tweaked without editing code.

Usage::

    from core.tuning import get as _tun
    speed = _tun("player", "speed", 8)

Every call site passes its own default (normally from
``core.constants``), so a missing file or key is never an error.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib

from core.errors import SetupError


DEFAULT_PATH = Path(__file__).resolve().parent / "data" / "tuning.toml"

_data: dict = {}


def load(path: str | Path | None = None) -> None:
    """Load tuning constants from *path*.

    If *path* is ``None``, default to ``DEFAULT_PATH`` (shipped inside
    the ``core`` package as ``data/tuning.toml``).

    Raises ``SetupError`` when the file exists but is not valid TOML.
    """
    global _data

    if path is None:
        path = DEFAULT_PATH
    else:
        path = Path(path)

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    try:
        with open(path, "rb") as f:
            _data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise SetupError(f"could not parse tuning file {path}: {exc}") from exc

    count = _count_leaves(_data)
    print(f"[TUNING] Loaded {count} values from {path}")


def reset() -> None:
    """Forget every loaded value; all lookups fall back to defaults."""
    global _data
    _data = {}


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"window"`` looks up ``[window]``.

    >>> get("projectile", "speed", 10)
    10
    """
    node = _data
    for part in section.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return default
        if node is None:
            return default
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def get_int(section: str, key: str, default: int) -> int:
    """Read an integer tuning value.

    Raises ``SetupError`` naming ``[section] key`` when the value is not
    an integer (TOML ``true``/``false`` included).
    """
    value = get(section, key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SetupError(
            f"tuning [{section}] {key} must be an integer, got {value!r}")
    return value


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _data
    for part in section_path.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return {}
        if node is None:
            return {}
    if isinstance(node, dict):
        return dict(node)
    return {}


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
