"""
INI materialization: environment variables -> Game.ini / Engine.ini.
"""

from .codec import decode_key, encode_key, escape_for_pattern
from .document import IniDocument, IniLine, build_multi_block
from .mapping import DEFAULT_RULES, MULTI_VALUE_KEYS, MappingRule, match_environment
from .materializer import ConfigMaterializer, materialize

__all__ = [
    "decode_key",
    "encode_key",
    "escape_for_pattern",
    "IniDocument",
    "IniLine",
    "build_multi_block",
    "DEFAULT_RULES",
    "MULTI_VALUE_KEYS",
    "MappingRule",
    "match_environment",
    "ConfigMaterializer",
    "materialize",
]
