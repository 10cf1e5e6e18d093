"""
Command-line interface for pluscodes.

Provides commands for encoding, decoding, shortening and recovering codes,
and for storing and searching addresses by code.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .address_store import Address, open_address_store
from .alphabet import MAX_DIGIT_COUNT, MIN_DIGIT_COUNT, PAIR_CODE_LENGTH
from .decode import decode
from .encode import encode
from .shorten import recover_nearest, shorten
from .validate import code_length, is_full, is_short, is_valid


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pluscodes",
        description="Encode, decode and shorten Plus Codes",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Encode command
    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode a latitude/longitude into a code",
    )
    encode_parser.add_argument("latitude", type=float, help="Latitude in degrees")
    encode_parser.add_argument("longitude", type=float, help="Longitude in degrees")
    encode_parser.add_argument(
        "-l", "--length",
        type=int,
        default=PAIR_CODE_LENGTH,
        help=f"Number of digits (default: {PAIR_CODE_LENGTH})",
    )

    # Decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Show the area of a full code",
    )
    decode_parser.add_argument("code", help="Full code")

    # Shorten and recover commands
    for name, help_text in (
        ("shorten", "Shorten a full code relative to a reference location"),
        ("recover", "Recover a full code from a short code and a reference location"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("code", help="Code")
        sub.add_argument("latitude", type=float, help="Reference latitude")
        sub.add_argument("longitude", type=float, help="Reference longitude")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check the syntax of codes",
    )
    validate_parser.add_argument("codes", nargs="+", help="Codes to check")

    # Stats command
    subparsers.add_parser(
        "stats",
        help="Show the cell size for every code length",
    )

    # Address commands
    address_parser = subparsers.add_parser(
        "address",
        help="Store and search addresses",
    )
    address_sub = address_parser.add_subparsers(dest="address_command", help="Address commands")

    add_parser = address_sub.add_parser("add", help="Add an address")
    add_parser.add_argument("--db", type=Path, required=True, help="DuckDB database file")
    add_parser.add_argument("name", help="Address name")
    add_parser.add_argument("number", type=int, help="House number")
    add_parser.add_argument("latitude", type=float, help="Latitude in degrees")
    add_parser.add_argument("longitude", type=float, help="Longitude in degrees")
    add_parser.add_argument(
        "--entity",
        action="append",
        default=[],
        help="Entity at the address (repeatable)",
    )
    add_parser.add_argument(
        "-l", "--length",
        type=int,
        default=PAIR_CODE_LENGTH,
        help=f"Number of digits of the stored code (default: {PAIR_CODE_LENGTH})",
    )

    find_parser = address_sub.add_parser("find", help="Find addresses in a code's area")
    find_parser.add_argument("--db", type=Path, required=True, help="DuckDB database file")
    find_parser.add_argument("code", help="Full code, or short code with --near")
    find_parser.add_argument(
        "--near",
        type=float,
        nargs=2,
        metavar=("LAT", "LNG"),
        help="Reference location for a short code",
    )

    return parser


def cmd_encode(args: argparse.Namespace) -> int:
    """Handle the encode command."""
    try:
        print(encode(args.latitude, args.longitude, args.length))
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Handle the decode command."""
    try:
        area = decode(args.code)
    except ValueError as e:
        print(f"Error: {e}")
        if is_short(args.code):
            print("Use the recover command to complete a short code first")
        return 1

    center = area.center
    print(f"Code: {args.code.upper()}")
    print(f"  Latitude:  {area.latitude_lo} to {area.latitude_hi}")
    print(f"  Longitude: {area.longitude_lo} to {area.longitude_hi}")
    print(f"  Center: {center.latitude}, {center.longitude}")
    print(f"  Code length: {area.code_length}")
    return 0


def cmd_shorten(args: argparse.Namespace) -> int:
    """Handle the shorten command."""
    if not is_full(args.code):
        print(f"Error: not a valid full Plus Code: {args.code!r}")
        return 1
    print(shorten(args.code, args.latitude, args.longitude).upper())
    return 0


def cmd_recover(args: argparse.Namespace) -> int:
    """Handle the recover command."""
    if not is_valid(args.code):
        print(f"Error: not a valid Plus Code: {args.code!r}")
        return 1
    print(recover_nearest(args.code, args.latitude, args.longitude))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    status = 0
    for code in args.codes:
        valid = is_valid(code)
        if not valid:
            status = 1
        print(
            f"{code}: valid={valid} short={is_short(code)} full={is_full(code)} "
            f"digits={code_length(code) if valid else 0}"
        )
    return status


def cmd_stats(args: argparse.Namespace) -> int:
    """Handle the stats command."""
    print("Cell size by code length:")
    print(f"  {'digits':>6}  {'height (deg)':>14}  {'width (deg)':>14}")

    length = MIN_DIGIT_COUNT
    while length <= MAX_DIGIT_COUNT:
        area = decode(encode(0.0, 0.0, length))
        print(f"  {area.code_length:>6}  {area.latitude_height:>14.10g}  {area.longitude_width:>14.10g}")
        # Pair lengths come two at a time
        length += 2 if length < PAIR_CODE_LENGTH else 1

    return 0


def _print_addresses(addresses: List[Address]) -> None:
    for address in addresses:
        entities = ", ".join(address.entities)
        print(
            f"  {address.plus_code}  {address.name} {address.number}  "
            f"({address.latitude}, {address.longitude})  [{entities}]"
        )


def cmd_address(args: argparse.Namespace) -> int:
    """Handle the address commands."""
    if args.address_command == "add":
        try:
            store = open_address_store(args.db, code_length=args.length)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

        with store:
            address = store.add(
                args.name, args.number, args.latitude, args.longitude, args.entity
            )
        print(f"Added {address.address_id} with plus code {address.plus_code}")
        return 0

    if args.address_command == "find":
        try:
            store = open_address_store(args.db, read_only=True)
        except FileNotFoundError as e:
            print(f"Error: {e}")
            return 1

        with store:
            try:
                if args.near:
                    addresses = store.find_near(args.code, args.near[0], args.near[1])
                else:
                    addresses = store.find_in_area(args.code)
            except ValueError as e:
                print(f"Error: {e}")
                if is_short(args.code):
                    print("Use --near LAT LNG to search with a short code")
                return 1

        print(f"Found {len(addresses)} address(es)")
        _print_addresses(addresses)
        return 0

    print("Error: missing address command (add or find)")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "encode":
        return cmd_encode(args)
    elif args.command == "decode":
        return cmd_decode(args)
    elif args.command == "shorten":
        return cmd_shorten(args)
    elif args.command == "recover":
        return cmd_recover(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "stats":
        return cmd_stats(args)
    elif args.command == "address":
        return cmd_address(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
