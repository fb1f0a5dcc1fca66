"""
Line-oriented batch driver: load a rule file, translate a flow file, write results.
"""
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel

from simple_nat.schemas.translation import TranslationResult, TranslationStatus
from simple_nat.services.translation_service import TranslationTable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class LoadSummary(BaseModel):
    """Outcome of loading a rule stream."""
    loaded: int = 0
    invalid_lines: List[str] = []

    @property
    def invalid(self) -> int:
        return len(self.invalid_lines)


class BatchReport(BaseModel):
    """Counts for one run over a rule file and a flow file."""
    rules: LoadSummary
    translated: int = 0
    no_match: int = 0
    invalid_queries: int = 0

    @property
    def queries(self) -> int:
        return self.translated + self.no_match + self.invalid_queries


def _non_blank(lines: Iterable[str]) -> Iterable[str]:
    # Only the line terminator is removed; surrounding spaces are left for the parser to reject
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line:
            yield line


def invalid_rule_message(line: str) -> str:
    return f"Error: {line} is not valid input"


def format_result(result: TranslationResult) -> str:
    """Render a translation result as one output line (without newline)."""
    if result.status == TranslationStatus.INVALID:
        return f"query {result.query} format is incorrect"
    if result.status == TranslationStatus.NO_MATCH:
        return f"No nat match for {result.query}"
    return f"{result.query} -> {result.destination}"


class BatchTranslator:
    """Feeds text lines into a TranslationTable and formats the outcomes."""

    def __init__(self, table: Optional[TranslationTable] = None):
        """
        Initialize batch translator.

        Args:
            table: Table to load rules into; a new empty one if omitted
        """
        self.table = table if table is not None else TranslationTable()

    def load_rules(self, lines: Iterable[str]) -> LoadSummary:
        """
        Define a rule for every non-blank line.

        Invalid lines are logged and collected; loading continues past them.
        """
        summary = LoadSummary()
        for line in _non_blank(lines):
            result = self.table.define_rule(line)
            if result.ok:
                summary.loaded += 1
            else:
                summary.invalid_lines.append(line)
                logger.warning(f"{invalid_rule_message(line)} ({result.reason})")

        logger.info(
            f"Rules loaded: loaded={summary.loaded}, invalid={summary.invalid}, "
            f"table_size={len(self.table)}"
        )
        return summary

    def process_flows(self, lines: Iterable[str]) -> List[TranslationResult]:
        """Translate every non-blank line."""
        return [self.table.translate(line) for line in _non_blank(lines)]

    def load_rules_file(self, path: PathLike) -> LoadSummary:
        """Load rules from a UTF-8 text file, one rule per line."""
        logger.info(f"Loading rules from {path}")
        with open(path, "r", encoding="utf-8", newline="\n") as f:
            return self.load_rules(f)

    def run_files(self, rules_path: PathLike, flows_path: PathLike, output_path: PathLike) -> BatchReport:
        """
        Load rules, translate every flow and write one result line per query.

        Raises:
            FileNotFoundError: if the rule or flow file does not exist
        """
        report = BatchReport(rules=self.load_rules_file(rules_path))

        logger.info(f"Translating flows from {flows_path} into {output_path}")
        with open(flows_path, "r", encoding="utf-8", newline="\n") as f:
            results = self.process_flows(f)

        with open(output_path, "w", encoding="utf-8") as out:
            for result in results:
                out.write(format_result(result) + "\n")
                if result.status == TranslationStatus.OK:
                    report.translated += 1
                elif result.status == TranslationStatus.NO_MATCH:
                    report.no_match += 1
                else:
                    report.invalid_queries += 1

        logger.info(
            f"Batch completed: queries={report.queries}, translated={report.translated}, "
            f"no_match={report.no_match}, invalid={report.invalid_queries}"
        )
        return report
