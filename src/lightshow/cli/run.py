"""Run a .lshow script against a Hue bridge.

Parses the whole file first, then connects to the bridge and executes
triggers in file order. Exits non-zero on any parse, lookup, bridge or
color error.
"""

import argparse
import sys
from pathlib import Path

from lightshow.config import DEFAULT_CONFIG_PATH, load_config
from lightshow.exceptions import LightshowError
from lightshow.lights import HueBridge, MockBridge
from lightshow.runtime import SCRIPT_SUFFIX, load_script
from lightshow.script import ActionExecutor, structure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lightshow",
        description="Run a lightshow script against a Hue bridge",
    )
    parser.add_argument(
        "script",
        type=Path,
        help=f"Script file to run (usually *{SCRIPT_SUFFIX})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Bridge config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Print light states instead of talking to a bridge",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one script to completion."""
    args = build_parser().parse_args(argv)

    if args.script.suffix != SCRIPT_SUFFIX:
        print(f"[SCRIPT] Warning: {args.script} does not end in {SCRIPT_SUFFIX}")

    try:
        entities = load_script(args.script)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[SCRIPT] Could not read {args.script}: {e}", file=sys.stderr)
        return 1
    except LightshowError as e:
        return _report(e)

    print(f"[SCRIPT] Parsed {len(entities)} entities from {args.script}")

    try:
        if args.mock:
            bridge = MockBridge()
        else:
            bridge = HueBridge.connect(load_config(args.config).hue)
        script = structure(entities, ActionExecutor(bridge))
    except LightshowError as e:
        return _report(e)

    print(f"[SCRIPT] Done, {len(script.variables)} variables bound")
    if script.midi_enabled():
        print(f"[MIDI] {len(script.midi_binds)} pad binds ready")

    return 0


def _report(error: LightshowError) -> int:
    print(f"[{error.stage.upper()}] {error.message}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
