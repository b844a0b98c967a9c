"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

import pandas as pd

from config.config import (
    EVALUATOR_CONFIG, LOGGING_CONFIG, OUTPUT_CONFIG, RESERVED_CHARS, validate_config
)
from calculator import ExpressionEvaluator, evaluate_series
from data.data_loader import load_expressions
from utils.formatting import format_result

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic expressions with + - * / ^, parentheses and unary signs"
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2+3*4'"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path to a CSV file or a text file with one expression per line"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=OUTPUT_CONFIG["expression_column"],
        help="Name of the expression column in a CSV file"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=OUTPUT_CONFIG["precision"],
        help="Significant digits used to print results"
    )
    parser.add_argument(
        "--decimal_separator",
        type=str,
        default=EVALUATOR_CONFIG["alternate_decimal_separator"],
        help="Alternate decimal separator normalized to '.' (default: ',')"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the results table to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=OUTPUT_CONFIG["output_path"],
        help="Path to save the results table"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv=None):
    validate_config()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )

    if len(args.decimal_separator) > 1:
        parser.error("--decimal_separator must be a single character")
    if args.decimal_separator and (args.decimal_separator in RESERVED_CHARS
                                   or args.decimal_separator.isspace()):
        parser.error(f"--decimal_separator cannot be {args.decimal_separator!r}")

    expressions = list(args.expressions)
    if args.file:
        expressions.extend(load_expressions(args.file, args.column).tolist())
    if not expressions:
        parser.error("no expressions given")

    evaluator = ExpressionEvaluator(alternate_decimal_separator=args.decimal_separator)
    results = evaluate_series(pd.Series(expressions, dtype=object), evaluator)

    show_expression = len(results) > 1
    for row in results.itertuples(index=False):
        if pd.notna(row.error):
            print(f"error: {row.expression}: {row.error}", file=sys.stderr)
            continue
        line = format_result(row.result, args.precision)
        if show_expression:
            line = f"{row.expression} = {line}"
        if args.show_postfix:
            line = f"{line}    [{row.postfix}]"
        print(line)

    if args.save_results:
        logger.info(f"Saving results to {args.output_path}")
        results.to_csv(args.output_path, index=False)

    return 1 if results['error'].notna().any() else 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
