# exifcodec/cli/main.py
from __future__ import annotations

from typing import Optional

from exifcodec.app.config import CodecConfig
from exifcodec.common.logging_config import configure_logging
from exifcodec.core.errors import ExifCodecError
from exifcodec.model.byteorder import SYSTEM_BYTE_ORDER

from exifcodec.cli.args import parse_args
from exifcodec.cli.commands import cmd_decode, cmd_encode, cmd_types


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)

    cfg = CodecConfig(
        metadata_dir=args.metadata_dir,
        byte_order=getattr(args, "order", None) or SYSTEM_BYTE_ORDER,
        text_encoding=args.encoding,
    )

    try:
        if args.cmd == "types":
            return cmd_types(cfg)
        if args.cmd == "decode":
            return cmd_decode(cfg, type_name=args.type, hex_parts=args.hex, count=args.count)
        if args.cmd == "encode":
            return cmd_encode(cfg, type_name=args.type, text=args.value)
        return 2
    except ExifCodecError as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1
    except (ValueError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1
