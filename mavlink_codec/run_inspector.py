#!/usr/bin/env python3
"""
MAVLink Codec Inspector - Command Line Entry Point

Browse the bundled message and enum definitions and decode raw payloads.

Usage:
    # List every message of the default dialect:
    python run_inspector.py list

    # Show the payload layout of a message (by name or id):
    python run_inspector.py describe HEARTBEAT

    # Show the entries of an enum:
    python run_inspector.py enum MAV_TYPE

    # Decode a hex payload:
    python run_inspector.py decode 0 000000000203510403

    # Check the definitions for schema problems:
    python run_inspector.py --dialect common -v check
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mavlink_codec.catalog.metadata import MetadataCatalog
from mavlink_codec.catalog.registry import MessageRegistry
from mavlink_codec.config import CodecConfig
from mavlink_codec.dialects import get_dialect
from mavlink_codec.protocol.errors import CodecError, CrcExtraMismatchError

logger = logging.getLogger(__name__)


def _message_key(text: str):
    return int(text, 0) if text[:1].isdigit() else text.upper()


def _format_value(value) -> str:
    name = getattr(value, "name", None)
    if name:
        return f"{name} ({int(value)})"
    return repr(value)


def cmd_list(registry: MessageRegistry, args) -> int:
    print(f"{'ID':>4}  {'NAME':<40} {'CRC':>4} {'LEN':>4}")
    for entry in registry:
        cls = entry.message_cls
        print(f"{cls.ID:>4}  {cls.NAME:<40} {cls.CRC_EXTRA:>4} {cls.payload_length:>4}")
    print(f"\n{len(registry)} messages in dialect '{registry.dialect.name}'")
    return 0


def cmd_describe(catalog: MetadataCatalog, args) -> int:
    try:
        metadata = catalog.message_metadata(_message_key(args.message))
    except (KeyError, ValueError):
        print(f"Unknown message: {args.message}")
        return 1

    print(f"{metadata.name} (id {metadata.id}, crc_extra {metadata.crc_extra}, "
          f"{metadata.payload_length} bytes, dialect {metadata.dialect})")
    print(metadata.description)
    print()
    print(f"{'OFS':>4} {'SIZE':>4}  {'FIELD':<32} {'TYPE':<14} {'ENUM':<28} DESCRIPTION")
    for f in metadata.wire_fields:
        print(f"{f.offset:>4} {f.size:>4}  {f.name:<32} {f.type:<14} {f.enum or '':<28} {f.description}")
    return 0


def cmd_enum(catalog: MetadataCatalog, args) -> int:
    try:
        metadata = catalog.enum_metadata(args.name.upper())
    except KeyError:
        print(f"Unknown enum: {args.name}")
        return 1

    kind = "bitmask" if metadata.bitmask else "enum"
    print(f"{metadata.name} ({kind}, {len(metadata.entries)} entries)")
    print(metadata.description)
    print()
    for entry in metadata.entries:
        print(f"{entry.value:>12}  {entry.name}")
        if entry.description:
            print(f"{'':>14}{entry.description}")
        for i, param in enumerate(entry.params, start=1):
            if param:
                print(f"{'':>14}param{i}: {param}")
    return 0


def cmd_decode(registry: MessageRegistry, args) -> int:
    try:
        msg_id = int(args.msg_id, 0)
        payload = bytes.fromhex(args.payload)
    except ValueError as e:
        print(f"Invalid input: {e}")
        return 2

    try:
        message = registry.decode_payload(msg_id, payload)
    except CodecError as e:
        print(f"Decode failed: {e}")
        return 1

    if message is None:
        print(f"Unknown message id {msg_id} in dialect '{registry.dialect.name}'")
        return 1

    print(f"{message.NAME} (id {message.ID})")
    for name, value in message.to_dict().items():
        print(f"  {name:<32} {_format_value(value)}")
    unknown = message.unrecognized_enum_fields()
    if unknown:
        print(f"  unrecognized enum values: {unknown}")
    return 0


def cmd_check(config: CodecConfig, args) -> int:
    problems: List[str] = []
    try:
        registry = MessageRegistry(config)
    except CrcExtraMismatchError as e:
        problems.append(str(e))
        registry = None

    catalog = MetadataCatalog(config)
    problems.extend(catalog.validate())

    for problem in problems:
        print(f"PROBLEM: {problem}")
    if problems:
        print(f"\n{len(problems)} problems found")
        return 1

    print(f"OK: {len(registry)} messages, {len(catalog.enum_names())} enums "
          f"in dialect '{config.dialect}'")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="MAVLink Codec Inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List messages of the common dialect:
  mavlink-inspect --dialect common list

  # Describe COMMAND_LONG:
  mavlink-inspect describe COMMAND_LONG

  # Decode a PING payload:
  mavlink-inspect decode 4 0100000000000000020000000304
        """,
    )

    parser.add_argument(
        "--dialect",
        default=None,
        help="Dialect to use (default: from config, ardupilotmega)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with codec config options",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List all messages")

    describe = subparsers.add_parser("describe", help="Show a message's payload layout")
    describe.add_argument("message", help="Message name or id")

    enum_parser = subparsers.add_parser("enum", help="Show an enum's entries")
    enum_parser.add_argument("name", help="Enum name, e.g. MAV_TYPE")

    decode = subparsers.add_parser("decode", help="Decode a hex payload")
    decode.add_argument("msg_id", help="Message id")
    decode.add_argument("payload", help="Payload bytes as hex")

    subparsers.add_parser("check", help="Validate the dialect definitions")

    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = CodecConfig.load(args.config) if args.config else CodecConfig()
        if args.dialect:
            config.dialect = args.dialect
        if args.command == "check":
            return cmd_check(config, args)
        if args.command in ("describe", "enum"):
            catalog = MetadataCatalog(config, get_dialect(config.dialect))
            handler = cmd_describe if args.command == "describe" else cmd_enum
            return handler(catalog, args)
        registry = MessageRegistry(config)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 2

    if args.command == "list":
        return cmd_list(registry, args)
    return cmd_decode(registry, args)


if __name__ == "__main__":
    sys.exit(main())
