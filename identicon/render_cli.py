"""
Render one identicon to a PNG file.

    identicon-render alice -o alice.png --size 300 --digest
"""

import argparse
import hashlib
import logging
import sys
from pathlib import Path

from identicon.kernel.codec import DEFAULT_SIZE, encode_png
from identicon.kernel.fingerprint import derive_code
from identicon.kernel.palette import ConfigError, default_settings
from identicon.kernel.renderer import render

log = logging.getLogger("identicon")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="identicon-render", description="Render an identicon PNG from text.")
    p.add_argument("text", help="Input string")
    p.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: <text>.png)")
    p.add_argument("--size", type=int, default=DEFAULT_SIZE, help="Side length in pixels")
    p.add_argument("--transparent", action="store_true", help="Leave the background transparent")
    p.add_argument("--one-color", action="store_true", help="Use the same color for every tile")
    p.add_argument("--alpha", type=int, default=255, help="Tile opacity 0-255")
    p.add_argument("--oversample", type=int, default=1, help="Supersampling factor for smooth edges")
    p.add_argument("--digest", action="store_true", help="Print the SHA-256 of the PNG bytes")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    try:
        settings = default_settings().replace(
            two_color=not args.one_color,
            alpha=args.alpha,
            transparent_background=args.transparent,
            oversample=args.oversample,
        )
        code = derive_code(args.text)
        body = encode_png(render(code, args.size, settings))
    except (ConfigError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    out = args.output or Path(f"{args.text}.png")
    out.write_bytes(body)
    log.info("wrote %s (code=%016x)", out, code)
    if args.digest:
        print(hashlib.sha256(body).hexdigest())
    return 0


if __name__ == "__main__":
    sys.exit(main())
