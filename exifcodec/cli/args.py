# exifcodec/cli/args.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from exifcodec.model.byteorder import ByteOrder
from exifcodec.model.loader import DEFAULT_METADATA_DIR


def byte_order_arg(v: str) -> ByteOrder:
    try:
        return ByteOrder.parse(v)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="exifcodec")
    parser.add_argument("--metadata-dir", default=str(DEFAULT_METADATA_DIR), help="Directory holding field_types.yml.")
    parser.add_argument("--encoding", default="ascii", help="Text encoding for ASCII values.")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--log-file", type=Path, default=None)

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("types", help="List the field-type catalog.")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--type",
        required=True,
        help="Field type name/id (e.g. SHORT, 5) or value kind (e.g. datetime, urational).",
    )
    common.add_argument(
        "--order",
        type=byte_order_arg,
        default=None,
        help="Byte order: little/big (II/MM). Defaults to the host order.",
    )

    p_dec = sub.add_parser("decode", parents=[common], help="Decode a hex payload.")
    p_dec.add_argument("--count", type=int, default=None, help="Element count (default: whole buffer).")
    p_dec.add_argument("hex", nargs="+", help="Payload bytes as hex; spaces allowed.")

    p_enc = sub.add_parser("encode", parents=[common], help="Encode a value to hex.")
    p_enc.add_argument(
        "value",
        help="Value text: '3/4' for rationals, comma separated for arrays, 'yyyy:MM:dd HH:mm:ss' for timestamps.",
    )

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
