# qtc_calculator/cli.py
import argparse
import sys
from typing import List, Optional

from .api_models import RawInputs, ValidationFailure
from .calculator import calculate_qtc
from .report import render_errors, render_report
from .validator import coerce_number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculate corrected QT (QTc) with narrow and wide QRS formulas")
    parser.add_argument("--qrs-type", choices=["narrow", "wide"], default="narrow", help="QRS width category")
    parser.add_argument("--heart-rate", help="Heart rate (bpm)")
    parser.add_argument("--qt", help="QT interval (ms)")
    parser.add_argument("--qrs", help="QRS duration (ms), wide QRS only")
    parser.add_argument("--sex", choices=["male", "female"], help="Sex, wide QRS only")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def read_inputs(args: argparse.Namespace) -> RawInputs:
    qrs_duration = None
    sex = None
    # Narrow mode ignores the wide-only fields, as the form does
    if args.qrs_type == "wide":
        qrs_duration = coerce_number(args.qrs)
        sex = args.sex

    return RawInputs(
        qrs_type=args.qrs_type,
        heart_rate_bpm=coerce_number(args.heart_rate),
        qt_interval_ms=coerce_number(args.qt),
        qrs_duration_ms=qrs_duration,
        sex=sex,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    outcome = calculate_qtc(read_inputs(args))

    if args.json:
        print(outcome.model_dump_json(indent=2))
    elif isinstance(outcome, ValidationFailure):
        print(render_errors(outcome.errors))
    else:
        print(render_report(outcome))

    return 1 if isinstance(outcome, ValidationFailure) else 0


if __name__ == "__main__":
    sys.exit(main())
