"""Command line harness that runs calculator operations and prints a table."""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from string_calculator.calculator import OPERATIONS, StringCalculator
from string_calculator.errors import CalculatorError

logger = logging.getLogger(__name__)
console = Console()

DEMO_CASES = [
    ("v1", "1,2"),
    ("v2", "1,2,3"),
    ("v3", "1\n2,3"),
    ("v4", "//;\n1;2;3"),
    ("v5", "//;\n1;2;-3"),
]


@dataclass
class Case:
    version: str
    input: str | None


@dataclass
class CaseResult:
    case: Case
    total: int | None = None
    error: CalculatorError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def load_cases(path: str | Path) -> list[Case]:
    """Read a YAML file with a top-level 'cases' list.

    Each entry needs a 'version' (v1..v5); 'input' may be omitted or null
    to exercise the missing-input path.

    Raises ValueError if the file has no cases list, an entry is not a
    mapping, or an entry names an unknown version.
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    raw_cases = data.get("cases") if isinstance(data, dict) else None
    if not raw_cases:
        raise ValueError(f"No 'cases' key found in {path}")
    if not isinstance(raw_cases, list):
        raise ValueError(f"'cases' in {path} must be a list, got {type(raw_cases).__name__}")

    cases = []
    for index, entry in enumerate(raw_cases):
        if not isinstance(entry, dict):
            raise ValueError(f"Case {index} in {path} must be a mapping, got {entry!r}")
        version = str(entry.get("version", "")).lower()
        if version not in OPERATIONS:
            raise ValueError(
                f"Case {index} in {path} has unknown version {entry.get('version')!r}"
            )
        raw_input = entry.get("input")
        cases.append(Case(version=version, input=None if raw_input is None else str(raw_input)))

    logger.info("Loaded %d cases from %s", len(cases), path)
    return cases


def run_case(calculator: StringCalculator, case: Case) -> CaseResult:
    operation = getattr(calculator, OPERATIONS[case.version])
    try:
        return CaseResult(case=case, total=operation(case.input))
    except CalculatorError as exc:
        logger.debug("%s failed with %s: %s", OPERATIONS[case.version], exc.kind.name, exc)
        return CaseResult(case=case, error=exc)


def build_table(results: list[CaseResult]) -> Table:
    table = Table(title="String Calculator")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Input", style="white")
    table.add_column("Result", justify="right")

    for result in results:
        shown_input = "[dim]<none>[/dim]" if result.case.input is None else escape(repr(result.case.input))
        if result.success:
            outcome = f"[green]{result.total}[/green]"
        else:
            outcome = f"[red]{result.error.kind.name}[/red]: {escape(str(result.error))}"
        table.add_row(OPERATIONS[result.case.version], shown_input, outcome)

    return table


def _decode_input(text: str) -> str:
    # Shells make a literal newline awkward to type, so accept "\n".
    return text.replace("\\n", "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Sum delimited integers with the string calculator kata versions"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-o",
        "--op",
        choices=sorted(OPERATIONS),
        help="Calculator version to run on INPUT",
    )
    source.add_argument(
        "--cases",
        type=Path,
        help="YAML file with a 'cases' list of {version, input} entries",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Numbers to sum (use \\n for a newline); only with --op",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every calculator call",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.input is not None and not args.op:
        parser.error("INPUT requires --op")

    if args.op:
        cases = [Case(args.op, None if args.input is None else _decode_input(args.input))]
    elif args.cases:
        cases = load_cases(args.cases)
    else:
        cases = [Case(version, text) for version, text in DEMO_CASES]

    calculator = StringCalculator()
    results = [run_case(calculator, case) for case in cases]

    console.print(build_table(results))
    console.print(f"Calls made: {calculator.get_called_count()}", highlight=False)

    if args.op and not results[0].success:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
