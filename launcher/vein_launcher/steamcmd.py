from __future__ import annotations
import subprocess
from pathlib import Path
from typing import List
from .settings import Settings
from .errors import InstallError, MissingDependencyError
from .logging_setup import get_logger

log = get_logger("vein.launcher.steamcmd")

class SteamCMD:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.bin = settings.steamcmd_sh

    def check_available(self) -> None:
        if not self.bin.is_file():
            raise MissingDependencyError(f"steamcmd not found at {self.bin} (set STEAMCMDDIR).")

    def _run(self, args: List[str]) -> None:
        cmd = [str(self.bin)] + args
        log.info("SteamCMD: %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            raise MissingDependencyError(f"Cannot execute {self.bin}: {e}") from e
        if proc.stdout:
            log.debug("steamcmd stdout: %s", proc.stdout[-4000:])
        if proc.stderr:
            log.debug("steamcmd stderr: %s", proc.stderr[-4000:])
        if proc.returncode != 0:
            raise InstallError(f"SteamCMD failed (rc={proc.returncode}).")

    def ensure_app(self, app_id: int, install_dir: Path, *, validate: bool = True) -> None:
        args: List[str] = [
            "+force_install_dir", str(install_dir),
            "+login", self.settings.steam_login,
            "+app_update", str(app_id),
        ]
        if validate:
            args.append("validate")
        args += ["+quit"]
        self._run(args)
