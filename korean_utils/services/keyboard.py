from __future__ import annotations

"""Two-set (dubeolsik) keyboard transliteration.

Converts text typed on a Latin keyboard into the Hangul it would produce with a
Korean two-set layout, and back.

Primary API:
  - english_typed_to_korean(text)
  - korean_typed_to_english(text)
  - get_key_map() / get_reverse_map()

The layout is read from korean_utils/data/dubeolsik.yaml. A missing or
malformed file falls back to the built-in tables below.
"""

import logging
from pathlib import Path
from typing import Any, Final, Optional

import yaml

from korean_utils.domain.composition import compose
from korean_utils.domain.decomposition import decompose

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Defaults (used if YAML is missing or malformed)
# ---------------------------------------------------------------------

_LOWER_KEYS: Final[str] = "abcdefghijklmnopqrstuvwxyz"
_UPPER_KEYS: Final[str] = _LOWER_KEYS.upper()

_DEFAULT_LOWER: Final[str] = "ㅁㅠㅊㅇㄷㄹㅎㅗㅑㅓㅏㅣㅡㅜㅐㅔㅂㄱㄴㅅㅕㅍㅈㅌㅛㅋ"
# Only Q W E R T O P differ from the unshifted row
_DEFAULT_UPPER: Final[str] = "ㅁㅠㅊㅇㄸㄹㅎㅗㅑㅓㅏㅣㅡㅜㅒㅖㅃㄲㄴㅆㅕㅍㅉㅌㅛㅋ"

# Compatibility jamo ㄱ (U+3131) .. ㅣ (U+3163), in code point order
_DEFAULT_REVERSE_KEYS: Final[tuple[str, ...]] = (
    "r", "R", "rt", "s", "sw", "sg", "e", "E", "f", "fr",
    "fa", "fq", "ft", "fx", "fv", "fg", "a", "q", "Q", "qt",
    "t", "T", "d", "w", "W", "c", "z", "x", "v", "g",
    "k", "o", "i", "O", "j", "p", "u", "P", "h", "hk",
    "ho", "hl", "y", "n", "nj", "np", "nl", "b", "m", "ml",
    "l",
)

DEFAULT_KEY_MAP: Final[dict[str, str]] = {
    **dict(zip(_LOWER_KEYS, _DEFAULT_LOWER)),
    **dict(zip(_UPPER_KEYS, _DEFAULT_UPPER)),
}
DEFAULT_REVERSE_MAP: Final[dict[str, str]] = {
    chr(0x3131 + i): keys for i, keys in enumerate(_DEFAULT_REVERSE_KEYS)
}


# ---------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------

_YAML_CACHE: dict[str, Any] | None = None
_YAML_CACHE_PATH: Path | None = None
_YAML_CACHE_MTIME_NS: int | None = None


def _layout_path() -> Path:
    # korean_utils/services/keyboard.py -> korean_utils/data/dubeolsik.yaml
    return Path(__file__).resolve().parents[1] / "data" / "dubeolsik.yaml"


def _load_yaml() -> dict[str, Any]:
    """Load the keyboard layout YAML if present.

    Failure is non-fatal; defaults will be used.
    """
    global _YAML_CACHE, _YAML_CACHE_PATH, _YAML_CACHE_MTIME_NS

    path = _layout_path()
    try:
        if not path.exists():
            logger.debug("Keyboard layout %s not found; using built-in layout", path)
            _YAML_CACHE = {}
            _YAML_CACHE_PATH = path
            _YAML_CACHE_MTIME_NS = None
            return {}

        mtime_ns = path.stat().st_mtime_ns
        if _YAML_CACHE is not None and _YAML_CACHE_PATH == path and _YAML_CACHE_MTIME_NS == mtime_ns:
            return dict(_YAML_CACHE)

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            parsed = data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read keyboard layout %s: %s", path, e)
        return {}

    _YAML_CACHE = dict(parsed)
    _YAML_CACHE_PATH = path
    _YAML_CACHE_MTIME_NS = mtime_ns
    return dict(_YAML_CACHE)


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str) and len(k) == 1 and v}


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def get_key_map() -> dict[str, str]:
    """Return the Latin key -> compatibility jamo table."""
    keys = _load_yaml().get("keys")
    if isinstance(keys, dict):
        merged = {**_string_map(keys.get("lower")), **_string_map(keys.get("upper"))}
        if merged:
            return merged
    return dict(DEFAULT_KEY_MAP)


def get_reverse_map() -> dict[str, str]:
    """Return the compatibility jamo -> key sequence table."""
    reverse = _string_map(_load_yaml().get("jamo"))
    if reverse:
        return reverse
    return dict(DEFAULT_REVERSE_MAP)


def english_typed_to_korean(text: Optional[str]) -> str:
    """Interpret `text` as keystrokes on a two-set layout.

    Example:
        english_typed_to_korean("ghdrlfehd") -> "홍길동"
    """
    if not text:
        return ""
    key_map = get_key_map()
    return compose("".join(key_map.get(ch, ch) for ch in text))


def korean_typed_to_english(text: Optional[str]) -> str:
    """Return the keystrokes that type `text` on a two-set layout.

    Example:
        korean_typed_to_english("까치") -> "Rkcl"
    """
    if not text:
        return ""
    reverse = get_reverse_map()
    jamo = decompose(text, use_compatibility=True, split_compounds=False)
    return "".join(reverse.get(ch, ch) for ch in jamo)
