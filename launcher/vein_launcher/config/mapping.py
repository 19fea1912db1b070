from __future__ import annotations
from typing import List, Mapping, Tuple
from pydantic import BaseModel, ConfigDict
from .codec import decode_key
from ..logging_setup import get_logger

log = get_logger("vein.launcher.config")

GAME_INI = "Game.ini"
ENGINE_INI = "Engine.ini"

VEIN_GAMESESSION = "/Script/Vein.VeinGameSession"


class MappingRule(BaseModel):
    """Environment variables starting with ``prefix`` land in ``[section]`` of ``file_name``."""
    model_config = ConfigDict(frozen=True)

    file_name: str
    section: str
    prefix: str


class MatchedVariable(BaseModel):
    name: str
    key: str
    value: str


DEFAULT_RULES: Tuple[MappingRule, ...] = (
    MappingRule(file_name=GAME_INI, section="/Script/Engine.GameSession", prefix="GAME_GAMESESSION_"),
    MappingRule(file_name=GAME_INI, section=VEIN_GAMESESSION, prefix="GAME_VEIN_GAMESESSION_"),
    MappingRule(file_name=GAME_INI, section="OnlineSubsystemSteam", prefix="GAME_ONLINE_SUBSYSTEM_STEAM_"),
    MappingRule(file_name=GAME_INI, section="URL", prefix="GAME_URL_"),
    MappingRule(file_name=GAME_INI, section="/Script/Vein.ServerSettings", prefix="GAME_SERVERSETTINGS_"),
    MappingRule(file_name=ENGINE_INI, section="Core.Log", prefix="ENGINE_CORE_LOG_"),
    MappingRule(file_name=ENGINE_INI, section="ConsoleVariables", prefix="ENGINE_CONSOLEVARIABLES_"),
)

# (section, key) pairs written as Key= / +Key= runs from a comma separated list
MULTI_VALUE_KEYS = frozenset({
    (VEIN_GAMESESSION, "SuperAdminSteamIDs"),
    (VEIN_GAMESESSION, "AdminSteamIDs"),
})


def is_multi_value(section: str, key: str) -> bool:
    return (section, key) in MULTI_VALUE_KEYS


def match_environment(rule: MappingRule, environ: Mapping[str, str]) -> List[MatchedVariable]:
    matched: List[MatchedVariable] = []
    for name in sorted(environ):
        if not name.startswith(rule.prefix):
            continue
        encoded = name[len(rule.prefix):]
        if not encoded:
            log.warning("Ignoring %s: no key name after prefix %s", name, rule.prefix)
            continue
        matched.append(MatchedVariable(name=name, key=decode_key(encoded), value=environ[name]))
    return matched
