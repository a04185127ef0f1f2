#!/usr/bin/env python3
# run_eval.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Command-line interface for formula evaluation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from logic import evaluate
from logic.exceptions import EvaluationError
from syntax import parse
from syntax.exceptions import ParseError
from utils.logger import configure_logging, get_logger


EXIT_OK = 0
EXIT_FAULT = 1
EXIT_PARSE_ERROR = 2
EXIT_FILE_ERROR = 3
EXIT_INTERRUPTED = 4
EXIT_UNEXPECTED = 5


def read_formula_file(filepath: Path) -> str:
    """Read a Lego formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula source as string

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        content = filepath.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Lego bounded first-order logic evaluator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_eval.py -f formula.lego
  python run_eval.py -e "forall x in [1, 3]. exists y in [1, 3]. x + y = 4"
  python run_eval.py -f formula.lego --debug
  python run_eval.py -f formula.lego --parse-only

Exit status:
  0 evaluated (result printed as true/false), 1 evaluation fault,
  2 parse error, 3 formula file error, 4 interrupted, 5 unexpected error
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-f", "--file", type=Path, help="Path to a file holding one formula"
    )
    source.add_argument("-e", "--expr", help="Formula given inline")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--parse-only",
        action="store_true",
        help="Parse the formula, print its canonical form and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Lego evaluator.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        source = args.expr if args.expr is not None else read_formula_file(args.file)

        formula = parse(source)

        if args.parse_only:
            print(formula)
            return EXIT_OK

        logger.evaluation_start(str(formula))
        result = evaluate(formula)
        logger.final_result(result)

        print(str(result).lower())
        return EXIT_OK

    except EvaluationError as e:
        logger.error(f"Error. {e}")
        return EXIT_FAULT

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return EXIT_PARSE_ERROR

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return EXIT_FILE_ERROR

    except KeyboardInterrupt:
        logger.error("Evaluation interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
