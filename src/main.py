"""
main.py - Preview entry point for framebits
-------------------------------------------

Loads the configuration and prints resolved preset values for a frame range,
so curves can be checked without a renderer.

Run:
    python src/main.py --list
    python src/main.py --frames 0:40:5
    python src/main.py --preset hero_title.opacity --preset card.fade_in_out --frames 0:101:10
    python src/main.py --frames 120 --log-level DEBUG
"""

import argparse
import sys
from typing import List, Optional

# Set UTF-8 encoding for output (log symbols and arrows)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding and sys.stdout.encoding.lower() != 'utf-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

from engine.frame_sampler import FrameSampler, frame_range
from engine.motion import css_number
from managers.config_manager import ConfigManager
from models.enums import LogCategory, LogLevel
from models.errors import DomainError
from utils.enum_helper import EnumHelper
from utils.logger import configure_logger, get_logger
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.SYSTEM)

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="framebits",
        description="Print resolved preset values for a range of frames",
    )
    parser.add_argument("--config", default="config/config.yaml",
                        help="config.yaml path (absolute or relative to src/)")
    parser.add_argument("--preset", action="append", dest="presets", metavar="NAME",
                        help="preset to sample (repeatable, default: all)")
    parser.add_argument("--frames", default="0:31:5", type=frame_range,
                        help="frames as start:stop[:step] or a single frame (default 0:31:5)")
    parser.add_argument("--log-level", default=None,
                        choices=EnumHelper.list_names(LogLevel),
                        type=str.upper,
                        help="override the configured log level")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--list", action="store_true", help="list presets and exit")
    return parser


def format_table(columns: List[str], rows: List[dict]) -> str:
    """Plain text table, numbers rendered CSS-style"""
    cells = [columns] + [
        [css_number(row[c]) if isinstance(row[c], (int, float)) else str(row[c]) for c in columns]
        for row in rows
    ]
    widths = [max(len(line[i]) for line in cells) for i in range(len(columns))]
    lines = ["  ".join(cell.rjust(width) for cell, width in zip(line, widths)) for line in cells]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # CLI flags apply to config loading output as well
    cli_level = LogLevel[args.log_level] if args.log_level else None
    configure_logger(cli_level or LogLevel.INFO, use_colors=not args.no_color)

    try:
        config_manager = ConfigManager(config_path=args.config)
        config = config_manager.load()

        configure_logger(
            cli_level or config.logging.log_level,
            use_colors=config.logging.use_colors and not args.no_color,
        )

        presets = config_manager.preset_manager
        if args.list:
            for name in presets.names():
                print(f"{name}: {Serializer.describe(presets.get(name))}")
            return EXIT_OK

        names = args.presets or presets.names()
        sampler = FrameSampler({name: presets.get(name) for name in names})
        rows = sampler.sample(args.frames)

    except DomainError as ex:
        log.error(ex.message, code=ex.code, **{k: str(v) for k, v in ex.details.items()})
        return EXIT_INVALID

    print(format_table(sampler.columns, rows))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
