#!/usr/bin/env python3
"""
PageLens capture CLI
Usage: python capture.py [http://localhost:8080] [--output-dir preview_output] [--timeout 15000] [--wait 3000] [--headful] [--json]
"""

import argparse
import asyncio
import json
import sys

from pagelens.core.capturer import PageCapturer
from pagelens.core.config import CaptureConfig, load_config, normalize_url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PageLens: console, crash and screenshot capture for a single page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  python capture.py\n"
               "  python capture.py http://localhost:8080 --wait 5000\n"
               "  APP_URL=http://staging.local python capture.py --json",
    )
    parser.add_argument("url", nargs="?", help="Page URL to capture (default: $APP_URL or http://localhost:8080)")
    parser.add_argument("--output-dir", help="Directory for console.log, summary.json and screenshots")
    parser.add_argument("--timeout", type=int, help="Navigation timeout in ms (default: 15000)")
    parser.add_argument("--wait", type=int, help="Settle delay after load in ms (default: 3000)")
    parser.add_argument("--headful", action="store_true", default=None, help="Run browser visibly")
    parser.add_argument("--json", action="store_true", help="Print summary.json to stdout when done")
    return parser


def resolve_config(args: argparse.Namespace) -> CaptureConfig:
    return load_config().with_overrides(
        url=normalize_url(args.url) if args.url else None,
        output_dir=args.output_dir,
        timeout_ms=args.timeout,
        settle_ms=args.wait,
        headful=args.headful,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = resolve_config(args)

    try:
        summary = asyncio.run(PageCapturer(config).capture())
    except Exception as e:
        print(f"\n  Capture failed: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))

    return 0 if summary.success else 1


if __name__ == "__main__":
    sys.exit(main())
