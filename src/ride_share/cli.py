# ride_share/cli.py
import argparse
import copy
import json
import sys
from contextlib import ExitStack

from ride_share.app.build import build
from ride_share.app.demo import DEMO_SCENARIO, render_transcript
from ride_share.config.models import ScenarioModel
from ride_share.io.recorder import JsonlSink, Recorder


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ride-share", description="Build a ride-sharing scenario and print its details"
    )
    parser.add_argument("--config", help="JSON scenario file (default: built-in demo)")
    parser.add_argument("--synthetic", type=int, metavar="N", help="add N sampled rides")
    parser.add_argument("--seed", type=int, help="seed for sampled rides")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="override the scenario log level",
    )
    parser.add_argument("--events", metavar="PATH", help="write business events as JSON lines")
    return parser


def _section(data: dict, key: str) -> dict:
    # explicit nulls count as "not given"
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"{key!r} must be a JSON object, got {type(value).__name__}")
    return value


def load_scenario(args: argparse.Namespace) -> ScenarioModel:
    if args.config:
        with open(args.config, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"top level must be a JSON object, got {type(data).__name__}")
    else:
        data = copy.deepcopy(DEMO_SCENARIO)

    if args.synthetic is not None or args.seed is not None:
        demand = _section(data, "demand")
        if args.synthetic is not None:
            demand["count"] = args.synthetic
        if args.seed is not None:
            demand["seed"] = args.seed
        data["demand"] = demand
    if args.log_level:
        data["log"] = {**_section(data, "log"), "level": args.log_level}
    return ScenarioModel.model_validate(data)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        model = load_scenario(args)
    except (OSError, ValueError) as e:
        # ValueError covers bad JSON, bad encoding and pydantic's ValidationError
        print(f"ride-share: invalid scenario: {e}", file=sys.stderr)
        return 2

    with ExitStack() as stack:
        recorder = None
        if args.events:
            fp = stack.enter_context(open(args.events, "w", encoding="utf-8"))
            recorder = Recorder(JsonlSink(fp))
        app = build(model, recorder=recorder)
        sys.stdout.write(render_transcript(app))
    return 0
