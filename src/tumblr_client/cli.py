"""Command line interface for the Tumblr API client."""

import json
import logging
import sys
from collections.abc import Callable
from typing import TypeVar

import click
import structlog
from pydantic import BaseModel

from tumblr_client.client import TumblrClient
from tumblr_client.observability.logging import configure_logging
from tumblr_client.settings.app import get_settings
from tumblr_client.transport.constants import ALLOWED_METHODS, COMPONENT_CLI
from tumblr_client.transport.errors import HttpStatusError, TumblrClientError
from tumblr_client.transport.uri import QueryParams


logger = structlog.get_logger()

ResultT = TypeVar("ResultT")


def parse_params(raw: tuple[str, ...]) -> dict[str, list[str]]:
    """Parse repeated ``key=value`` options into a parameter mapping.

    Args:
        raw: Values of the ``--param`` option.

    Returns:
        Mapping of key to the values given for it, in order.

    Raises:
        click.BadParameter: If an entry has no ``=``.
    """
    params: dict[str, list[str]] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"Expected key=value, got {item!r}"
            raise click.BadParameter(msg, param_hint="--param")
        params.setdefault(key, []).append(value)
    return params


def _run(ctx: click.Context, call: Callable[[TumblrClient], ResultT]) -> ResultT:
    """Run a client call, turning client errors into exit status 1."""
    log = logger.bind(component=COMPONENT_CLI)
    client: TumblrClient = ctx.obj
    try:
        return call(client)
    except HttpStatusError as e:
        log.error("cli_request_failed", **e.to_dict())
        click.echo(f"Error: {e.message}", err=True)
        if e.response.body:
            click.echo(e.response.body.decode("utf-8", errors="replace"), err=True)
        sys.exit(1)
    except TumblrClientError as e:
        log.error("cli_request_failed", **e.to_dict())
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    finally:
        client.close()


def _echo_model(model: BaseModel) -> None:
    click.echo(json.dumps(model.model_dump(mode="json"), indent=2))


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level.")
@click.option(
    "--json-logs/--console-logs",
    default=False,
    help="Emit logs as JSON instead of console format.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_logs: bool) -> None:
    """Tumblr API client CLI.

    Credentials are read from TUMBLR_CONSUMER_KEY, TUMBLR_CONSUMER_SECRET,
    TUMBLR_TOKEN and TUMBLR_TOKEN_SECRET (environment or .env).
    """
    configure_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        json_format=json_logs,
    )
    if ctx.obj is None:
        ctx.obj = TumblrClient.from_settings(get_settings())


@cli.command()
@click.argument(
    "method", type=click.Choice(sorted(ALLOWED_METHODS), case_sensitive=False)
)
@click.argument("endpoint")
@click.option(
    "--param",
    "-p",
    "raw_params",
    multiple=True,
    help="Request parameter as key=value; repeat for several.",
)
@click.pass_context
def request(
    ctx: click.Context,
    method: str,
    endpoint: str,
    raw_params: tuple[str, ...],
) -> None:
    """Issue METHOD against ENDPOINT and print the raw body."""
    params: QueryParams = parse_params(raw_params)
    response = _run(ctx, lambda c: c.request(method, endpoint, params))
    click.echo(response.body.decode("utf-8", errors="replace"))


@cli.command()
@click.pass_context
def user(ctx: click.Context) -> None:
    """Print info about the authenticated user."""
    _echo_model(_run(ctx, lambda c: c.get_user()))


@cli.command()
@click.option("--limit", type=click.IntRange(1, 20), default=None)
@click.pass_context
def dashboard(ctx: click.Context, limit: int | None) -> None:
    """Print the authenticated user's dashboard."""
    params = {"limit": limit} if limit else None
    _echo_model(_run(ctx, lambda c: c.get_dashboard(params)))


@cli.command()
@click.option("--limit", type=click.IntRange(1, 20), default=None)
@click.pass_context
def likes(ctx: click.Context, limit: int | None) -> None:
    """Print the posts the authenticated user liked."""
    params = {"limit": limit} if limit else None
    _echo_model(_run(ctx, lambda c: c.get_likes(params)))


@cli.command()
@click.argument("tag")
@click.option("--limit", type=click.IntRange(1, 20), default=None)
@click.pass_context
def tagged(ctx: click.Context, tag: str, limit: int | None) -> None:
    """Print public posts tagged with TAG."""
    params = {"limit": limit} if limit else None
    _echo_model(_run(ctx, lambda c: c.tagged_search(tag, params)))


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
