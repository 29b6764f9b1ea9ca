# ride_share/app/cli.py
import argparse
import json
import sys

from pydantic import ValidationError

from ride_share.app.build import build
from ride_share.app.demo import DEMO_SCENARIO, run_demo
from ride_share.io.run_logging import RunLogging


def _parse_args(argv):
    p = argparse.ArgumentParser(
        prog="ride-share-demo",
        description="Build a ride-sharing scenario and print driver and rider reports.",
    )
    p.add_argument("scenario", nargs="?", help="JSON scenario file (default: built-in demo)")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="override the scenario's log level",
    )
    return p.parse_args(argv)


def _load(path: str | None):
    if not path:
        return dict(DEMO_SCENARIO)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def main(argv=None) -> int:
    args = _parse_args(argv)
    cfg = None
    try:
        cfg = _load(args.scenario)
        if args.log_level and isinstance(cfg, dict):
            cfg = {**cfg, "log": {**(cfg.get("log") or {}), "level": args.log_level}}
        app = build(cfg)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        run_id = cfg.get("run_id", "local") if isinstance(cfg, dict) else "local"
        RunLogging(run_id=run_id).error(exc=exc, scenario=args.scenario)
        print(exc, file=sys.stderr)
        return 2

    run_demo(app)
    return 0


if __name__ == "__main__":
    sys.exit(main())
