"""
Command-line batch driver.

Reads rules from the rule file, translates every query in the flow file and
writes one result line per query to the output file:

    simple-nat --rules NAT --flows FLOW --output OUTPUT
"""
import argparse
import logging
import sys
from typing import List, Optional

from simple_nat.core.config import settings
from simple_nat.core.logging_config import setup_logging
from simple_nat.services.batch_service import BatchTranslator, invalid_rule_message

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simple-nat",
        description="Translate (address, port) flows through a static NAT rule table.",
    )
    parser.add_argument("--rules", default=settings.RULES_FILE,
                        help=f"rule file, one '<src>,<dst>' per line (default: {settings.RULES_FILE})")
    parser.add_argument("--flows", default=settings.FLOWS_FILE,
                        help=f"flow file, one '<ip>:<port>' per line (default: {settings.FLOWS_FILE})")
    parser.add_argument("--output", default=settings.OUTPUT_FILE,
                        help=f"output file (default: {settings.OUTPUT_FILE})")
    parser.add_argument("--log-level", default=None,
                        help=f"logging level (default: {settings.LOG_LEVEL})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    translator = BatchTranslator()
    try:
        report = translator.run_files(args.rules, args.flows, args.output)
    except FileNotFoundError as e:
        logger.error(f"Input file not found: {e.filename}")
        return 1

    for line in report.rules.invalid_lines:
        print(invalid_rule_message(line))

    print(
        f"{report.rules.loaded} rule(s) loaded, {report.rules.invalid} rejected; "
        f"{report.queries} quer{'y' if report.queries == 1 else 'ies'} written to {args.output} "
        f"({report.translated} translated, {report.no_match} no match, {report.invalid_queries} invalid)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
