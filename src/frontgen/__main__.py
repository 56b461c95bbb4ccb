from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import FrontgenError
from .generation import GenerationProfile
from .generation.profile import LANGUAGES
from .generator import OutputSpec, generate_files, process_openapi
from .loader import is_url, load_openapi, url_origin


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="frontgen",
        description="Generate a TypeScript/JavaScript front-end client from an OpenAPI document.",
    )
    parser.add_argument("source", help="Path or http(s) URL of the OpenAPI document (JSON/YAML)")
    parser.add_argument("-n", "--name", default="api", help="Base name of the generated files and interface")
    parser.add_argument("-u", "--url", help="Base URL of the API (defaults to the origin of a URL source)")
    parser.add_argument("-l", "--language", choices=LANGUAGES, default="ts", help="Implementation language")
    parser.add_argument("-o", "--output-dir", type=Path, default=Path("."), help="Output directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    base_url = args.url
    if base_url is None:
        if not is_url(args.source):
            parser.error("--url is required when the source is a file")
        base_url = url_origin(args.source)

    try:
        document = load_openapi(args.source)
        profile = GenerationProfile.from_language(args.language)
        sources = process_openapi(document, args.name, base_url, profile)
        generate_files(OutputSpec(name=args.name, output_dir=args.output_dir), sources, profile)
    except FrontgenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
