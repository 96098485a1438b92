"""
Command line entry point.

Prints the ABI-encoded Merkle root of the fixture members for the given
val and price. Stdout carries only that value so a contract test can read
it through an FFI call.
"""

import json
from pathlib import Path
from typing import Optional

import click

from merkle_fixtures import __version__
from merkle_fixtures.config import LOG_LEVELS, get_default_log_level
from merkle_fixtures.exceptions import InvalidUintError
from merkle_fixtures.fixture import build_fixture, fixture_details
from merkle_fixtures.leaves import parse_uint256
from merkle_fixtures.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _uint256_arg(ctx: click.Context, param: click.Parameter, value: str) -> int:
    try:
        return parse_uint256(value, param.name)
    except InvalidUintError as e:
        raise click.BadParameter(e.reason, ctx=ctx, param=param)


def _setup_logging(ctx: click.Context, param: click.Parameter, value: str) -> str:
    # Eager, so it runs before VAL and PRICE are parsed.
    setup_logging(level=value)
    return value


@click.command()
@click.argument("val", callback=_uint256_arg)
@click.argument("price", callback=_uint256_arg)
@click.option(
    "--details",
    is_flag=True,
    help="Print leaves, proofs and root as JSON instead of the encoded root",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="With --details, write the JSON report to this file",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=get_default_log_level,
    is_eager=True,
    callback=_setup_logging,
    help="Set logging level (logs go to stderr)",
)
@click.version_option(version=__version__, prog_name="generate-root-with-details")
def main(val: int, price: int, details: bool, output: Optional[Path], log_level: str):
    """
    Compute the Merkle root over the fixture members hashed with VAL and PRICE
    and print it ABI-encoded as bytes32.
    """
    if output is not None and not details:
        raise click.UsageError("--output requires --details")

    fixture = build_fixture(val, price)

    if not details:
        click.echo(fixture.encoded, nl=False)
        return

    report = json.dumps(fixture_details(fixture), indent=2)
    if output is None:
        click.echo(report)
        return
    output.write_text(report + "\n")
    logger.info("saved_details", path=str(output))
