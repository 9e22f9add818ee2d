"""Compute the ObfuscatedEncrypt digest of a string.

Usage:
    python scripts/why_encrypt.py                                 # data "why", key 42,17,99
    python scripts/why_encrypt.py --data "Wh?" --format hex
    python scripts/why_encrypt.py --data-hex 576868 --profile dotnet --trace

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from whylab.cipher import PipelineSpec, WhyCryptoError, build_pipeline, format_digest, validate_spec
from whylab.config import load_settings, parse_key_list
from whylab.step_logger import StepLogger


def main() -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="ObfuscatedEncrypt digest")
    src = parser.add_mutually_exclusive_group()
    src.add_argument("--data", type=str, default=None, help='UTF-8 input (default: "why")')
    src.add_argument("--data-hex", type=str, default=None, help="Hex-encoded input")
    parser.add_argument(
        "--key", type=str, default=None,
        help="Comma-separated key bytes (default: WHY_DEFAULT_KEY or 42,17,99)",
    )
    parser.add_argument("--format", choices=["hex", "hyphen", "base64"], default=settings.display_format)
    parser.add_argument("--profile", choices=["standard", "dotnet"], default=settings.profile)
    parser.add_argument("--hash", dest="hash_name", default=settings.hash_name)
    parser.add_argument(
        "--strict-permutation", action="store_true", default=settings.strict_permutation,
        help="Fail instead of reproducing the lossy permutation",
    )
    parser.add_argument("--trace", action="store_true", help="Print every intermediate stage as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.data_hex is not None:
            data = bytes.fromhex(args.data_hex)
        else:
            data = (args.data if args.data is not None else "why").encode("utf-8")
        key = bytes(parse_key_list(args.key)) if args.key else settings.default_key_bytes()
    except ValueError as exc:
        parser.error(str(exc))

    spec = PipelineSpec(
        profile=args.profile,
        hash_name=args.hash_name,
        strict_permutation=args.strict_permutation,
    )
    ok, errs = validate_spec(spec)
    if not ok:
        for e in errs:
            print(f"WARNING: {e}", file=sys.stderr)

    pipeline = build_pipeline(spec, StepLogger())
    try:
        trace = pipeline.trace(data, key)
    except WhyCryptoError as exc:
        print(f"ERROR: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    if args.trace:
        print(json.dumps(trace.to_dict(), indent=2))
    print(format_digest(trace.digest, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
