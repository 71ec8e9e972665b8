# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Command line interface."""

from __future__ import annotations

import json
import logging

import click
import yaml
from tqdm import tqdm

from .config import LOG_LEVELS, config
from .consensus import tally_votes
from .errors import ShareQuorumError
from .testcases import load_test_case, run_test_cases


class IntLiteral(click.ParamType):
    """Integer accepting ``0x``/``0o``/``0b`` prefixes."""

    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return int(value, 0)
        except ValueError:
            self.fail(f"{value!r} is not an integer literal", param, ctx)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.option(
    "--log-level",
    default=config.log_level,
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
)
@click.option("--modulus", type=IntLiteral(), default=None, help="Prime field size (default: 2**127 - 1).")
@click.pass_context
def main(ctx: click.Context, log_level: str, modulus: int | None) -> None:
    """Recover threshold-shared secrets by majority vote."""
    _setup_logging(log_level)
    ctx.obj = {"modulus": modulus if modulus is not None else config.modulus}


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--progress/--no-progress", default=False, help="Show a progress bar.")
@click.option("--json", "as_json", is_flag=True, help="Print the results as JSON.")
@click.pass_obj
def solve(obj: dict, files: tuple[str, ...], progress: bool, as_json: bool) -> None:
    """Solve each test-case FILE and print its secret."""
    sources = tqdm(files, unit="case", disable=not progress)
    results = run_test_cases(sources, obj["modulus"])
    if as_json:
        click.echo(json.dumps([{"name": r.name, "secret": str(r.secret)} for r in results], indent=2))
        return
    for result in results:
        click.echo(f"{result.name}: {result.secret}")


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def tally(obj: dict, file: str) -> None:
    """Print the vote tally for a single test-case FILE."""
    try:
        case = load_test_case(file)
        votes = tally_votes(case.shares, case.k, obj["modulus"])
    except (ShareQuorumError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise click.ClickException(str(exc)) from exc
    for value, count in votes.items():
        click.echo(f"{value}\t{count}")
    if votes.skipped:
        click.echo(f"# {votes.skipped} combination(s) skipped", err=True)


if __name__ == "__main__":
    main()
