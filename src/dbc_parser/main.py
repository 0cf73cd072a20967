from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import orjson

if sys.platform != "win32":
    import uvloop

from .config import get_settings
from .core.errors import InvalidDbcError
from .core.processor import DBCProcessor
from .utils.logging import setup_logging


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbc-parser",
        description="List the signals of a DBC file with their Vector CANdb++ start bits",
    )
    parser.add_argument("-i", "--input", type=Path, metavar="FILE", help="DBC file path")
    parser.add_argument("--json", action="store_true", help="dump the parsed model as JSON")
    parser.add_argument("--lossy", action="store_true", help="replace invalid UTF-8 instead of failing")
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = get_settings()
    logger = setup_logging(settings.logging.level, settings.logging.format)

    processor = DBCProcessor(
        args.input or settings.dbc_file,
        lossy_utf8=args.lossy or settings.parser.lossy_utf8,
        metrics_enabled=settings.metrics.enabled,
    )

    try:
        await processor.initialize()
    except (OSError, UnicodeDecodeError, InvalidDbcError) as e:
        logger.error("cli_load_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.json:
            dump = orjson.dumps(
                processor.db.model_dump(mode="json"),
                option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS,
            )
            print(dump.decode())
        else:
            for message in processor.messages:
                for signal in message.signals:
                    print(f"Signal Name: {signal.name}")
                    print(f"Vector Bit: {signal.vector_start_bit()}")
    finally:
        await processor.close()

    return 0


def run() -> None:
    if sys.platform == "win32":
        sys.exit(asyncio.run(main()))
    sys.exit(uvloop.run(main()))


if __name__ == "__main__":
    run()
