from __future__ import annotations
import argparse
import json
import os
import sys
from typing import List, Optional
import uvicorn
from pydantic import ValidationError
from .settings import Settings
from .logging_setup import setup_logging, get_logger
from .errors import LauncherError
from .config import materialize
from .orchestrator import Orchestrator
from .privileges import drop_privileges
from .api import create_app

log = get_logger("vein.launcher.cli")

def _fail(msg: str) -> int:
    print(f"ERROR: {msg}", file=sys.stderr)
    return 1

def _generate_configs(settings: Settings) -> int:
    paths = materialize(settings, os.environ)
    print("Updated INI files:")
    for p in paths:
        print(f"  {p}")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vein-launcher")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="Generate INI files, install/update via SteamCMD and exec the server")
    run_p.add_argument("--no-drop-privileges", action="store_true", help="Stay root even when started as root")
    run_p.add_argument("extra", nargs="*", help="Extra server arguments (pass after --)")

    sub.add_parser("generate-configs", help="Only write Game.ini / Engine.ini from the environment")
    sub.add_parser("plan", help="Print the INI writes and launch command as JSON and exit")

    api_p = sub.add_parser("api", help="Run read-only REST API (FastAPI)")
    api_p.add_argument("--host", default="0.0.0.0")
    api_p.add_argument("--port", type=int, default=8000)
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as e:
        return _fail(f"Invalid settings: {e}")
    setup_logging(settings)

    try:
        if args.cmd == "generate-configs":
            return _generate_configs(settings)

        if args.cmd == "plan":
            plan = Orchestrator(settings).plan().to_dict()
            print(json.dumps(plan, indent=2, ensure_ascii=False))
            return 0 if plan.get("ok", True) else 1

        if args.cmd == "run":
            if not args.no_drop_privileges:
                drop_privileges(settings.run_as_user, ["run", "--", *args.extra])
            Orchestrator(settings).run(args.extra)
            return 0

        if args.cmd == "api":
            app = create_app(settings)
            uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())
            return 0
    except LauncherError as e:
        log.error("%s", e)
        return _fail(str(e))

    return 2

def generate_configs_main() -> int:
    """Console entry for the materializer alone. Takes no arguments."""
    return main(["generate-configs"])
