import argparse
import base64
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from collectdnet.inspector_app import InspectorSettings, get_settings, sample_model
from collectdnet.inspector_app.logging import create_logger, ring_handler
from collectdnet.parsing.packet import decode_packet
from collectdnet.parsing.typesdb import TypesDB, load_types_db_file


def read_capture(path: str, input_format: str) -> bytes:
    raw = Path(path).read_bytes()
    if input_format == "hex":
        return bytes.fromhex("".join(raw.decode("ascii").split()))
    if input_format == "base64":
        return base64.b64decode(b"".join(raw.split()), validate=True)
    return raw


def build_parser(settings: InspectorSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode a captured collectd network packet.")
    parser.add_argument("capture", type=str, help="File holding one captured datagram.")
    parser.add_argument(
        "--format",
        choices=["raw", "hex", "base64"],
        default=settings.input_format,
        help="Encoding of the capture file.",
    )
    parser.add_argument("--types-db", type=str, default=settings.types_db_path, help="types.db used to name values.")
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=settings.strict,
        help="Print nothing from a packet that fails to decode.",
    )
    parser.add_argument("--diagnostics", action="store_true", help="Print decoder log events to stderr.")
    return parser


def main(argv: Optional[Sequence[str]] = None, settings: Optional[InspectorSettings] = None) -> int:
    settings = settings or get_settings()
    args = build_parser(settings).parse_args(argv)

    logger = create_logger("collectdnet", settings.log_ring_size, settings.log_level)
    events = ring_handler(logger)
    events.clear()

    types: Optional[TypesDB] = None
    try:
        if args.types_db:
            types = load_types_db_file(args.types_db)
        data = read_capture(args.capture, args.format)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    result = decode_packet(data)
    if result.ok or not args.strict:
        for sample in result.samples:
            print(sample_model(sample, types).model_dump_json())

    if args.diagnostics:
        for event in events.get_events():
            print(json.dumps(event, default=str), file=sys.stderr)

    if result.error is not None:
        print(f"error at offset {result.offset}: {result.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
