from __future__ import annotations
from pathlib import Path
from typing import Optional
from .logging_setup import get_logger

log = get_logger("vein.launcher.steamclient")

STEAMCLIENT_SO = "steamclient.so"


def find_steamclient(steamcmd_dir: Path, server_path: Path) -> Optional[Path]:
    for candidate in (steamcmd_dir / "linux64" / STEAMCLIENT_SO, server_path / STEAMCLIENT_SO):
        if candidate.is_file():
            return candidate
    return None


def link_steamclient(steamcmd_dir: Path, server_path: Path, sdk64_dir: Path) -> Optional[Path]:
    """
    The Steam API looks for ``~/.steam/sdk64/steamclient.so``; point it at the
    copy shipped with SteamCMD (or, failing that, the server install).
    An existing symlink is left alone.
    """
    source = find_steamclient(steamcmd_dir, server_path)
    if source is None:
        log.warning("%s not found in %s or %s. SteamAPI might fail.",
                    STEAMCLIENT_SO, steamcmd_dir / "linux64", server_path)
        return None

    sdk64_dir.mkdir(parents=True, exist_ok=True)
    target = sdk64_dir / STEAMCLIENT_SO
    if target.is_symlink():
        log.debug("%s already linked -> %s", target, target.resolve())
        return target
    if target.exists():
        target.unlink()
    target.symlink_to(source)
    log.info("Symlinked %s -> %s for SteamAPI.", target, source)
    return target
