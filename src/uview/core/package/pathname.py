from __future__ import annotations

"""
Pathname Sanitizer.

Cleans the raw "pathname" member of a package entry. Several producers
append trailing newlines, NUL bytes or a literal "00" to the stored path;
this module turns those blobs into usable logical paths.
"""

import unicodedata

from uview.domain.constants import SPURIOUS_PATH_SUFFIX

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def sanitize_pathname(raw: bytes) -> str:
    """
    Decode and clean a raw pathname blob.

    Control characters are removed first so that a suffix such as
    "\\n00" collapses to "00" before the suffix check runs. The "00"
    suffix is removed at most once per call.

    Args:
        raw: Bytes of the "pathname" archive member.

    Returns:
        str: The sanitized asset path.
    """
    text = raw.decode("utf-8", errors="replace")
    text = strip_control_chars(text)
    if text.endswith(SPURIOUS_PATH_SUFFIX):
        text = text[: -len(SPURIOUS_PATH_SUFFIX)]
    return text


def strip_control_chars(text: str) -> str:
    """Remove every Unicode control character (category Cc)."""
    return "".join(ch for ch in text if unicodedata.category(ch) != "Cc")
