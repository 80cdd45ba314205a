"""Command line interface for dumping sparse vectors.

Usage:
    vecdump dump vectors.jsonl --dictionary dictionary.txt
    vecdump dump vectors.jsonl --csv --names-as-comments --output vectors.csv
    vecdump dictionary "out/dictionary.file-*"
"""

import json
import logging
import sys
from pathlib import Path
from typing import Iterator, Optional

import typer

from vecdump.core.config import Config
from vecdump.core.types import SparseVector
from vecdump.dictionary import DictionaryError, DictionaryLoaderFactory
from vecdump.formatters import to_json, write_csv

logger = logging.getLogger(__name__)
app = typer.Typer(help="Render sparse vectors and term dictionaries as text")

LOAD_ERRORS = (DictionaryError, FileNotFoundError, IndexError, ValueError)


def read_vectors(path: Path) -> Iterator[SparseVector]:
    """
    Yield vectors from a JSON-lines file.

    Each line holds an object with ``indices`` and ``values`` and
    optionally ``size`` and ``name``. Blank lines are skipped.
    """
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
                yield SparseVector(
                    indices=[int(i) for i in record["indices"]],
                    values=[float(v) for v in record["values"]],
                    size=_coerce_size(record.get("size")),
                    name=record.get("name"),
                )
            except (json.JSONDecodeError, KeyError, TypeError) as e:
                raise ValueError(f"Invalid vector on line {line_no} of {path}: {e}") from e


def _coerce_size(size):
    # JSON writers often emit whole numbers as floats
    if isinstance(size, float) and size.is_integer():
        return int(size)
    return size


def _configure_logging(verbose: bool, config: Optional[Config]) -> None:
    level = "DEBUG" if verbose else "WARNING"
    if config is not None and not verbose:
        level = str(config.get("logging.level", level)).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_config(path: Optional[Path], env: Optional[str] = None) -> Optional[Config]:
    if path is None:
        return None
    return Config.load(str(path), env=env)


@app.command()
def dump(
    vectors: Path = typer.Argument(..., help="JSON-lines file of vectors"),
    dictionary: Optional[Path] = typer.Option(
        None, "--dictionary", "-d", help="Dictionary file, shard directory or glob"
    ),
    dictionary_type: Optional[str] = typer.Option(
        None, help="Dictionary loader: auto, text or sharded"
    ),
    csv: Optional[bool] = typer.Option(
        None, "--csv/--json", help="Render CSV instead of the JSON-like form"
    ),
    names_as_comments: Optional[bool] = typer.Option(
        None, "--names-as-comments/--no-names-as-comments",
        help="Write vector names as '#' comment lines (CSV only)",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write here instead of stdout"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
    env: Optional[str] = typer.Option(
        None, "--env", help="Apply environments/<env>.yaml next to the config file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render every vector in a file as CSV or JSON-like text."""
    try:
        config = _load_config(config_file, env)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    _configure_logging(verbose, config)

    settings = config.get_section("dump") if config else {}
    if csv is None:
        csv = settings.get("format", "json") == "csv"
    if names_as_comments is None:
        names_as_comments = bool(settings.get("names_as_comments", False))
    if dictionary_type is None:
        dictionary_type = config.get("dictionary.type", "auto") if config else "auto"

    try:
        terms = None
        if dictionary is not None and not csv:
            terms = DictionaryLoaderFactory.load(dictionary, kind=dictionary_type)

        sink = open(output, "w", encoding="utf-8") if output else sys.stdout
        try:
            count = 0
            for vector in read_vectors(vectors):
                if csv:
                    write_csv(vector, sink, names_as_comments)
                else:
                    sink.write(to_json(vector, terms))
                    sink.write("\n")
                count += 1
        finally:
            if output:
                sink.close()
    except LOAD_ERRORS as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger.info(f"Dumped {count} vectors from {vectors}")


@app.command("dictionary")
def show_dictionary(
    source: str = typer.Argument(..., help="Dictionary file, shard directory or glob"),
    dictionary_type: str = typer.Option("auto", help="Dictionary loader: auto, text or sharded"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Print each assigned dictionary slot as index<TAB>term."""
    _configure_logging(verbose, None)
    try:
        terms = DictionaryLoaderFactory.load(source, kind=dictionary_type)
    except LOAD_ERRORS as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for index, term in enumerate(terms):
        if term is not None:
            typer.echo(f"{index}\t{term}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
