"""
vvcorpus CLI — Click commands.

Commands: extract (project → transcript), preprocess (raw corpus →
clean UTF-8), sentences (split cleaned text). extract and preprocess
are also installed as standalone scripts.
"""

import codecs
import logging
import sys
from functools import partial
from pathlib import Path

import click

from vvcorpus import __version__
from vvcorpus.batch import BatchResult, run_batch
from vvcorpus.config import LEGACY_ENCODING, LOG_FORMAT, PROGRESS_FORMAT
from vvcorpus.errors import VvcorpusError


# ──────────────────────────────────────────────
# Shared options
# ──────────────────────────────────────────────

_paths_argument = click.argument(
    "paths", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path)
)

_keep_going_option = click.option(
    "--keep-going", is_flag=True, default=False,
    help="Continue past failing files and report them all at the end.",
)

_verbose_option = click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Enable debug logging."
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _echo_progress(source: Path, destination: Path) -> None:
    click.echo(PROGRESS_FORMAT.format(source=source, destination=destination))


def _validate_encoding(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise click.BadParameter(f"unknown encoding: {value}")
    return value


def _run(
    paths: tuple[Path, ...], operation, keep_going: bool, on_success=_echo_progress
) -> None:
    """Run a batch and turn failures into a red message and exit 1."""
    try:
        result = run_batch(
            paths, operation, keep_going=keep_going, on_success=on_success
        )
    except (VvcorpusError, OSError) as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)

    _report_failures(result)


def _report_failures(result: BatchResult) -> None:
    if result.ok:
        return

    for _source, error in result.failed:
        click.secho(f"✗ {error}", fg="red", err=True)

    total = len(result.succeeded) + len(result.failed)
    click.secho(
        f"✗ {len(result.failed)} of {total} files failed", fg="red", bold=True, err=True
    )
    sys.exit(1)


# ──────────────────────────────────────────────
# Commands
# ──────────────────────────────────────────────


@click.command("extract")
@_paths_argument
@_keep_going_option
@_verbose_option
def extract_cmd(paths: tuple[Path, ...], keep_going: bool, verbose: bool) -> None:
    """Write a .txt transcript next to each .vvproj project file."""
    from vvcorpus.extract import extract

    _configure_logging(verbose)
    _run(paths, extract, keep_going)


@click.command("preprocess")
@_paths_argument
@_keep_going_option
@click.option(
    "--encoding", default=LEGACY_ENCODING, show_default=True,
    callback=_validate_encoding, help="Encoding of the raw input files.",
)
@_verbose_option
def preprocess_cmd(
    paths: tuple[Path, ...], keep_going: bool, encoding: str, verbose: bool
) -> None:
    """Clean .raw corpus files into UTF-8 text with the .raw suffix removed."""
    from vvcorpus.preprocess import preprocess

    _configure_logging(verbose)
    _run(paths, partial(preprocess, encoding=encoding), keep_going)


@click.command("sentences")
@_paths_argument
@_keep_going_option
@click.option("--show", is_flag=True, default=False, help="Print every sentence.")
@_verbose_option
def sentences_cmd(
    paths: tuple[Path, ...], keep_going: bool, show: bool, verbose: bool
) -> None:
    """Split cleaned corpus files into sentences and report counts."""
    from vvcorpus.sentences import read_sentences

    def _echo_sentences(source: Path, sentences: list[str]) -> None:
        click.echo(f"{source}: {len(sentences)} sentences")
        if show:
            for i, sentence in enumerate(sentences, start=1):
                click.echo(f"  [{i} / {len(sentences)}] {sentence}")

    _configure_logging(verbose)
    _run(paths, read_sentences, keep_going, on_success=_echo_sentences)


# ──────────────────────────────────────────────
# Main group
# ──────────────────────────────────────────────


@click.group()
@click.version_option(__version__, prog_name="vvcorpus")
def main() -> None:
    """vvcorpus — text preparation for voice-synthesis projects."""
    pass


main.add_command(extract_cmd)
main.add_command(preprocess_cmd)
main.add_command(sentences_cmd)


if __name__ == "__main__":
    main()
