"""Command-line interface for lcsort.

Provides CLI commands to parse, compare and sort LC call numbers.
"""

import importlib.metadata
import sys
import time
import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from lcsort.audit import AuditLogger, generate_run_id

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("lcsort")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

case_sensitive_option = click.option(
    "--case-sensitive",
    "-c",
    is_flag=True,
    help="Compare letters with regard to case (lowercase sorts after uppercase)",
)


@contextmanager
def _stage(logger: AuditLogger | None, name: str, counters: dict[str, int]) -> Iterator[None]:
    """Time a stage of the sort command and log its start and end."""
    if logger is None:
        yield
        return

    start = time.perf_counter()
    logger.stage_started(name)
    yield
    logger.stage_finished(name, round(time.perf_counter() - start, 6), counters)


@click.group()
@click.version_option(version=__version__, prog_name="lcsort")
def cli() -> None:
    """Compare and sort Library of Congress call numbers in shelf order.

    Use 'lcsort COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("call_numbers", nargs=-1, required=True)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Output JSONL file path (default: print to stdout)",
)
@case_sensitive_option
def parse(call_numbers: tuple[str, ...], output: str | None, case_sensitive: bool) -> None:
    """Parse CALL_NUMBERS into their sortable components.

    One JSON object is emitted per call number.

    Examples
    --------
        lcsort parse "AM101 .S3533 L58 1987b"
        lcsort parse "HF5381 .S5145 2008" "PE1479 .B87 O93 1993" -o parsed.jsonl
    """
    from lcsort import parse_call_number, to_json_line, write_jsonl

    try:
        parsed = [parse_call_number(cn, case_sensitive) for cn in call_numbers]

        if output is None:
            for components in parsed:
                click.echo(to_json_line(components))
        else:
            write_jsonl(parsed, output)
            click.secho(f"✓ Successfully wrote {len(parsed)} records to {output}", fg="green")

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("first")
@click.argument("second")
@case_sensitive_option
@click.option(
    "--explain",
    "-e",
    is_flag=True,
    help="Also print the component that decides the ordering",
)
def compare(first: str, second: str, case_sensitive: bool, explain: bool) -> None:
    """Compare call numbers FIRST and SECOND.

    Prints -1 if FIRST shelves before SECOND, 1 if after, 0 if equal.

    Examples
    --------
        lcsort compare "AM101 .S3533 L58 1987b" "HF5381 .S5145 2008"
        lcsort compare am101 AM101 --case-sensitive --explain
    """
    from lcsort import parse_call_number
    from lcsort.compare import compare_components, first_difference

    try:
        a = parse_call_number(first, case_sensitive)
        b = parse_call_number(second, case_sensitive)

        click.echo(str(compare_components(a, b)))

        if explain:
            field_name = first_difference(a, b)
            if field_name is None:
                click.echo("equal")
            else:
                click.echo(
                    f"{field_name}: {getattr(a, field_name)!r} vs {getattr(b, field_name)!r}"
                )

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, allow_dash=True))
@click.option(
    "--output",
    "-o",
    type=click.Path(allow_dash=True),
    default="-",
    help="Output file, one call number per line (default: stdout)",
)
@case_sensitive_option
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort in descending shelf order",
)
@click.option(
    "--log-file",
    type=click.Path(),
    default=None,
    help="Append a JSONL audit trail of the run to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def sort(
    input_path: str,
    output: str,
    case_sensitive: bool,
    reverse: bool,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Sort the call numbers in INPUT_PATH into shelf order.

    INPUT_PATH holds one call number per line; use '-' to read stdin.
    Blank lines are skipped. Call numbers that do not follow the LC
    grammar are kept and sorted on their full text.

    Examples
    --------
        lcsort sort holdings.txt -o shelf_order.txt
        cat holdings.txt | lcsort sort - --reverse
        lcsort sort holdings.txt --log-file events.jsonl -v
    """
    from lcsort import CompareOptions, iter_call_numbers, parse_call_number, sort_parsed

    options = CompareOptions(case_sensitive=case_sensitive)
    logger = AuditLogger(generate_run_id(), Path(log_file)) if log_file else None
    start = time.perf_counter()
    call_numbers: list[str] = []

    try:
        if logger is not None:
            logger.run_started(
                command=sys.argv,
                parameters={**options.to_dict(), "reverse": reverse, "input": input_path},
            )

        read_counters: dict[str, int] = {}
        with _stage(logger, "read", read_counters):
            with click.open_file(input_path, encoding="utf-8") as f:
                call_numbers = list(iter_call_numbers(f))
            read_counters["call_numbers"] = len(call_numbers)

        parse_counters: dict[str, int] = {}
        with _stage(logger, "parse", parse_counters):
            parsed = [parse_call_number(cn, options.case_sensitive) for cn in call_numbers]
            unparsed = 0
            for idx, components in enumerate(parsed):
                if components.is_structured:
                    continue
                unparsed += 1
                if logger is not None:
                    logger.call_number_unparsed(f"item:{idx}", components.pristine)
                if verbose:
                    click.echo(f"Unparsed call number: {components.pristine!r}", err=True)
            parse_counters["unparsed"] = unparsed

        sort_counters: dict[str, int] = {}
        with _stage(logger, "sort", sort_counters):
            ordered = sort_parsed(parsed, reverse=reverse)
            sort_counters["sorted"] = len(ordered)

        with _stage(logger, "write", {}):
            with click.open_file(output, "w", encoding="utf-8") as out:
                for components in ordered:
                    out.write(components.pristine + "\n")

        if logger is not None:
            logger.run_finished(
                status="success",
                duration_seconds=round(time.perf_counter() - start, 6),
                records_processed=len(ordered),
            )

        if verbose:
            click.echo(
                f"Sorted {len(ordered)} call numbers ({unparsed} unparsed)",
                err=True,
            )

    except Exception as e:
        trace = traceback.format_exc() if verbose else None
        if logger is not None:
            logger.error(type(e).__name__, str(e), traceback=trace)
            logger.run_finished(
                status="failed",
                duration_seconds=round(time.perf_counter() - start, 6),
                records_processed=len(call_numbers),
            )
        click.secho(f"Error: {e}", fg="red", err=True)
        if trace is not None:
            click.echo(trace, err=True)
        sys.exit(1)

    finally:
        if logger is not None:
            logger.close()


if __name__ == "__main__":
    cli()
