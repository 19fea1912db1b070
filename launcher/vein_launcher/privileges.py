from __future__ import annotations
import os
import shutil
import subprocess
import sys
from typing import List
from .errors import MissingDependencyError
from .logging_setup import get_logger

log = get_logger("vein.launcher.privileges")

GOSU = "gosu"


def _install_gosu() -> None:
    log.info("gosu not found, attempting to install...")
    cmd = "apt-get update && apt-get install -y --no-install-recommends gosu && rm -rf /var/lib/apt/lists/*"
    proc = subprocess.run(["sh", "-c", cmd])
    if proc.returncode != 0:
        log.warning("Installing gosu failed (rc=%s)", proc.returncode)


def drop_privileges(user: str, argv: List[str], *, install_missing: bool = True) -> None:
    """
    When running as root, re-execute ``python -m vein_launcher <argv>`` as
    ``user`` through gosu. Does not return in that case.
    """
    if os.geteuid() != 0:
        return

    if shutil.which(GOSU) is None and install_missing:
        _install_gosu()
    if shutil.which(GOSU) is None:
        raise MissingDependencyError("gosu is not installed or not in PATH. Cannot switch user.")

    log.info("Switching to user %s...", user)
    os.execvp(GOSU, [GOSU, user, sys.executable, "-m", "vein_launcher", *argv])
