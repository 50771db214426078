"""
Main entry point for the imagekey command line tool.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .core.cache_keys import parse_cache_file_path
from .core.errors import ParameterError, PathError
from .services.config_service import ConfigService
from .services.transformation_service import TransformationService

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="imagekey", description="Image transformation parameters and cache paths")
    p.add_argument("--settings", type=str, default=None, help="Settings JSON file with named transformations")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Validate a parameter string and print its canonical form")
    p_parse.add_argument("parameters", help="e.g. w_400,h_300,c_e or t_<name>")
    p_parse.add_argument("--scale", type=int, default=None)
    p_parse.add_argument("--json", action="store_true", help="Print the parameters as JSON")

    p_path = sub.add_parser("path", help="Print the cache file path for an image and parameter string")
    p_path.add_argument("image", help="Source image path, must have an extension")
    p_path.add_argument("parameters")
    p_path.add_argument("--scale", type=int, default=None)

    p_decode = sub.add_parser("decode", help="Recover image path and parameters from a cache file path")
    p_decode.add_argument("cache_path")
    p_decode.add_argument("--json", action="store_true")

    return p


def _run(args: argparse.Namespace) -> int:
    if args.command == "decode":
        image_path, params = parse_cache_file_path(args.cache_path)
        if args.json:
            print(json.dumps({"image": image_path, "parameters": params.to_dict()}, sort_keys=True))
        else:
            print(image_path)
            print(params)
        return 0

    service = TransformationService(ConfigService(args.settings))
    if args.command == "parse":
        params = service.resolve(args.parameters, args.scale)
        print(json.dumps(params.to_dict(), sort_keys=True) if args.json else params)
    elif args.command == "path":
        print(service.cache_path(args.image, args.parameters, args.scale))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main command line entry point."""
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return _run(args)
    except (ParameterError, PathError) as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
