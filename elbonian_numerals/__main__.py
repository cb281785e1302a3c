import argparse
import logging
import sys
from typing import Optional, Sequence

from elbonian_numerals import (
    GrammarConfig,
    NumeralError,
    NumeralValue,
    set_grammar_config,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def convert(value: NumeralValue, target: str) -> str:
    if target == "auto":
        target = "symbolic" if value.is_decimal else "decimal"
    if target == "decimal":
        return str(value.to_decimal())
    return value.to_symbolic()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Convert between decimal and Elbonian numerals")
    parser.add_argument("values", nargs="+", help="Decimal (1-9999) or Elbonian numerals")
    parser.add_argument(
        "--to",
        choices=["auto", "decimal", "symbolic"],
        default="auto",
        help="Output form (default: auto, the form the input is not in)",
    )
    parser.add_argument(
        "--legacy-repetition",
        action="store_true",
        help="Only reject repetition when every letter of a class is over its limit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.legacy_repetition:
        set_grammar_config(GrammarConfig(repetition_rule="legacy"))
        logger.info("Using legacy repetition rule")

    failures = 0
    for raw in args.values:
        try:
            value = NumeralValue(raw)
        except NumeralError as exc:
            failures += 1
            logger.info("Rejected %r: %s", raw, exc)
            print(f"error: {raw}: {exc}", file=sys.stderr)
            continue
        logger.info("Parsed %r as %s numeral", value.text, value.kind.value)
        print(f"{value.text} -> {convert(value, args.to)}")

    if failures:
        raise SystemExit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
