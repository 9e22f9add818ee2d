"""Run the evaluation suite over the pipeline and save a JSON report.

Usage:
    python scripts/analyze_pipeline.py                        # default spec
    python scripts/analyze_pipeline.py --profile dotnet --trials 50
    python scripts/analyze_pipeline.py --lengths 7 28 32 49

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from whylab.cipher import PipelineSpec, WhyCryptoError
from whylab.config import load_settings
from whylab.evaluation import run_evaluation
from whylab.utils.repro import make_run_dir, set_global_seed, write_json


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="ObfuscatedEncrypt evaluation suite")
    parser.add_argument("--profile", choices=["standard", "dotnet"], default=settings.profile)
    parser.add_argument("--hash", dest="hash_name", default=settings.hash_name)
    parser.add_argument(
        "--lengths", nargs="+", type=int, default=None,
        help="Byte lengths to check the permutation on (default: digest size, 7, 14, 28, 32)",
    )
    parser.add_argument("--trials", type=int, default=200, help="Avalanche trials (default: 200)")
    parser.add_argument("--seed", type=int, default=settings.global_seed)
    parser.add_argument("--output-dir", type=str, default=settings.runs_dir)
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    set_global_seed(args.seed)
    spec = PipelineSpec(profile=args.profile, hash_name=args.hash_name)

    try:
        report = run_evaluation(spec, lengths=args.lengths, trials=args.trials, seed=args.seed)
    except WhyCryptoError as exc:
        parser.error(f"{type(exc).__name__}: {exc}")
    print(report.to_summary())

    paths = make_run_dir(args.output_dir, f"eval_{spec.profile}_{spec.hash_name}")
    write_json(paths.spec_json, spec.model_dump())
    write_json(paths.report_json, report.to_dict())
    print(f"\nReport saved to: {paths.report_json}")


if __name__ == "__main__":
    main()
