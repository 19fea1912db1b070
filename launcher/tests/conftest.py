import pytest

from vein_launcher.settings import Settings


@pytest.fixture
def config_dir(tmp_path):
    return tmp_path / "config"


@pytest.fixture
def settings(tmp_path, config_dir):
    """Settings pointing every path into tmp_path."""
    return Settings(
        config_path=config_dir,
        server_path=tmp_path / "server",
        steamcmd_dir=tmp_path / "steamcmd",
        sdk64_dir=tmp_path / "home" / ".steam" / "sdk64",
        server_multihome_ip="",
        skip_install=False,
        log_file=None,
    )
