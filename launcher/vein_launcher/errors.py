from __future__ import annotations


class LauncherError(Exception):
    """Base class for fatal launcher errors. Each one aborts the startup sequence."""


class MissingDependencyError(LauncherError):
    pass


class MissingConfigError(LauncherError):
    pass


class ConfigWriteError(LauncherError):
    pass


class InstallError(LauncherError):
    pass


class ServerNotFoundError(LauncherError):
    pass
