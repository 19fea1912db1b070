from __future__ import annotations
import os
from pathlib import Path
from typing import List, Mapping, Optional, Sequence
from .settings import Settings
from .logging_setup import get_logger
from .errors import MissingConfigError
from .config import ConfigMaterializer, materialize
from .steamcmd import SteamCMD
from .steamclient import link_steamclient
from .server import build_server_args, exec_server, find_server_binary, SERVER_BINARIES
from .planner import Plan

log = get_logger("vein.launcher.orch")

class Orchestrator:
    def __init__(self, settings: Settings, environ: Optional[Mapping[str, str]] = None):
        self.settings = settings
        self.environ = dict(os.environ if environ is None else environ)
        self.steamcmd = SteamCMD(settings)

    def preflight(self) -> None:
        """Fail fast on missing configuration or tools, before anything is written."""
        if self.settings.config_path is None:
            raise MissingConfigError("CONFIG_PATH is not set.")
        if self.settings.skip_install:
            log.info("SKIP_INSTALL: SteamCMD is not required.")
        else:
            self.steamcmd.check_available()

    def materialize_config(self) -> List[Path]:
        return materialize(self.settings, self.environ)

    def ensure_server(self) -> None:
        if self.settings.skip_install:
            log.info("SKIP_INSTALL: not installing/updating the VEIN dedicated server.")
            return
        log.info("Updating/Installing Vein Dedicated Server (AppID: %s) into %s",
                 self.settings.steam_app_id, self.settings.server_path)
        self.steamcmd.ensure_app(
            app_id=self.settings.steam_app_id,
            install_dir=self.settings.server_path,
            validate=self.settings.steam_validate,
        )

    def fix_steamclient(self) -> Optional[Path]:
        return link_steamclient(self.settings.steamcmd_dir, self.settings.server_path, self.settings.sdk64_dir)

    def server_args(self, extra_args: Sequence[str] = ()) -> List[str]:
        return build_server_args(self.settings, self.environ, extra_args)

    def plan(self, extra_args: Sequence[str] = ()) -> Plan:
        if self.settings.config_path is None:
            return Plan(ok=False, writes=[], notes=["CONFIG_PATH is not set."])
        plan = ConfigMaterializer(self.settings.config_path).plan(self.environ)
        binary = self.settings.server_path / SERVER_BINARIES[0]
        plan.launch_cmd = [str(binary)] + self.server_args(extra_args)
        if self.settings.skip_install:
            plan.notes.append("SKIP_INSTALL: SteamCMD update is skipped.")
        return plan

    def start_server(self, extra_args: Sequence[str] = ()) -> None:
        binary = find_server_binary(self.settings.server_path)
        exec_server(binary, self.server_args(extra_args), cwd=self.settings.server_path)

    def run(self, extra_args: Sequence[str] = ()) -> None:
        self.preflight()
        paths = self.materialize_config()
        log.info("Updated INI files: %s", ", ".join(str(p) for p in paths))
        self.ensure_server()
        self.fix_steamclient()
        self.start_server(extra_args)
