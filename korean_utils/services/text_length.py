from __future__ import annotations

from typing import Optional

from korean_utils.domain.syllable import is_hangul
from korean_utils.services.settings_store import SettingsStore

# settings path -> (file stamp when read, hangul_width)
_WIDTH_CACHE: dict[str, tuple[tuple[int, int, int] | None, int]] = {}


def _configured_width() -> int:
    """Return the hangul_width setting, re-reading settings.yaml only when it changes."""
    store = SettingsStore()
    path = store.path
    try:
        st = path.stat()
        stamp: tuple[int, int, int] | None = (st.st_mtime_ns, st.st_size, st.st_ino)
    except OSError:
        stamp = None

    cache_key = str(path)
    cached = _WIDTH_CACHE.get(cache_key)
    if cached is not None and cached[0] == stamp:
        return cached[1]

    width = store.get_hangul_width()
    _WIDTH_CACHE[cache_key] = (stamp, width)
    return width


def length(text: Optional[str], hangul_width: Optional[int] = None) -> int:
    """Display length of `text`, counting each Hangul character as `hangul_width`.

    When `hangul_width` is None the configured width is used (2 unless
    settings.yaml says otherwise).

    Example:
        length("일이삼123", 3) -> 12
    """
    if hangul_width is None:
        hangul_width = _configured_width()
    if hangul_width < 0:
        raise ValueError("hangul_width must be non-negative, got %d" % hangul_width)
    if not text:
        return 0
    return sum(hangul_width if is_hangul(ch) else 1 for ch in text)
