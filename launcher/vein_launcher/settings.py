from __future__ import annotations
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    config_path: Optional[Path] = Field(default=None, alias="CONFIG_PATH")
    server_path: Path = Field(default=Path("/home/steam/vein-server"), alias="SERVER_PATH")
    steamcmd_dir: Path = Field(default=Path("/home/steam/steamcmd"), alias="STEAMCMDDIR")
    sdk64_dir: Path = Field(default=Path.home() / ".steam" / "sdk64", alias="SDK64_DIR")

    steam_app_id: int = Field(default=2131400, alias="STEAMAPPID")
    steam_login: str = Field(default="anonymous", alias="STEAMLOGIN")
    steam_validate: bool = Field(default=True, alias="STEAM_VALIDATE")
    skip_install: bool = Field(default=False, alias="SKIP_INSTALL")

    server_multihome_ip: str = Field(default="", alias="SERVER_MULTIHOME_IP")
    run_as_user: str = Field(default="steam", alias="RUN_AS_USER")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")
    log_file: Optional[Path] = Field(default=None, alias="LOG_FILE")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True, env_ignore_empty=True)

    @property
    def steamcmd_sh(self) -> Path:
        return self.steamcmd_dir / "steamcmd.sh"
