"""
vein_launcher package
---------------------
Launcher process for VEIN dedicated servers in Linux / Docker environments.
Contains modules for settings, INI materialization from the environment,
SteamCMD integration, the steamclient.so fix-up and server process launch.
"""

__version__ = "0.3.0"
