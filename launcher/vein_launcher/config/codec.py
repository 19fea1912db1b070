"""
Environment-safe key names.

Environment variable names cannot carry ``.`` and keys that legitimately
contain ``_`` would be ambiguous, so both are spelled out with markers:

    Foo_DOT_Bar             -> Foo.Bar
    bUse_UNDERSCORE_Thing   -> bUse_Thing
"""

from __future__ import annotations
import re

DOT_MARKER = "_DOT_"
UNDERSCORE_MARKER = "_UNDERSCORE_"


def decode_key(token: str) -> str:
    # dot markers first: "_UNDERSCORE_" must not be split by a dot marker pass
    return token.replace(DOT_MARKER, ".").replace(UNDERSCORE_MARKER, "_")


def encode_key(key: str) -> str:
    """Inverse of :func:`decode_key`, used to show which variable targets a key."""
    return key.replace("_", UNDERSCORE_MARKER).replace(".", DOT_MARKER)


def escape_for_pattern(key: str) -> str:
    return re.escape(key)
