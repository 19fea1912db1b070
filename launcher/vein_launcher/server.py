"""
server.py — builds the VEIN server command line and replaces the launcher with it.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import List, Mapping, Sequence
from .settings import Settings
from .errors import ServerNotFoundError
from .logging_setup import get_logger

log = get_logger("vein.launcher.server")

SERVER_BINARIES = ("VeinServer.sh", "VeinServer")

DEFAULT_QUERY_PORT = "27015"
DEFAULT_GAME_PORT = "7777"


def build_server_args(settings: Settings, environ: Mapping[str, str], extra: Sequence[str] = ()) -> List[str]:
    # ports come from the same variables that feed Game.ini so both always agree
    query_port = environ.get("GAME_ONLINE_SUBSYSTEM_STEAM_GameServerQueryPort") or DEFAULT_QUERY_PORT
    game_port = environ.get("GAME_URL_Port") or DEFAULT_GAME_PORT

    args = ["-log", f"-QueryPort={query_port}", f"-Port={game_port}"]
    if settings.server_multihome_ip:
        args.append(f"-multihome={settings.server_multihome_ip}")
    args += list(extra)
    return args


def find_server_binary(server_path: Path) -> Path:
    for name in SERVER_BINARIES:
        candidate = server_path / name
        if candidate.is_file():
            return candidate
    raise ServerNotFoundError(
        f"VeinServer.sh or VeinServer executable not found in {server_path}. Please check the installation."
    )


def exec_server(binary: Path, args: List[str], cwd: Path) -> None:
    log.info("Starting Vein Server with arguments: %s", " ".join(args))
    os.chdir(cwd)
    os.execv(str(binary), [str(binary)] + args)
