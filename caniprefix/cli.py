"""Console script for caniprefix."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console

from . import __version__ as _version
from .constants import DEBUG_ENV_VAR, PREF_ENABLED, PREF_ERA, PREF_VENDORS
from .exceptions import CaniuseError
from .preferences import default_preferences
from .render import render_results
from .resolver import PrefixResolver
from .util.log import debug_enabled


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "identifiers",
    metavar="<property>",
    nargs=-1,
    required=True,
    type=click.STRING,
)
@click.option(
    "--db",
    "db_path",
    envvar="CANIPREFIX_DB",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to a Can I Use data.json file.",
)
@click.option("--vendors", default=None, help="Comma-separated vendor ids, or 'all'.")
@click.option("--era", default=None, help="Oldest era to support, e.g. e-2, e0.")
@click.option("--disable", "disabled", is_flag=True, help="Disable Can I Use lookups.")
@click.option("--expand", "expanded", is_flag=True, help="Print prefixed declaration names.")
@click.version_option(_version, "-v", "--version")
def main(
    identifiers: tuple[str, ...],
    db_path: Path,
    vendors: str | None,
    era: str | None,
    disabled: bool,
    expanded: bool,
) -> None:
    """
    Resolve vendor prefixes for CSS properties from a Can I Use database

    \b
    Example usages:
      caniprefix --db data.json transform
      caniprefix --db data.json --era e0 --vendors chrome,safari @keyframes
      caniprefix --db data.json --expand box-shadow
    """
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG)
        logging.getLogger("caniprefix").debug("%s=1, debug logging on", DEBUG_ENV_VAR)

    preferences = default_preferences()
    if vendors is not None:
        preferences.set(PREF_VENDORS, vendors)
    if era is not None:
        preferences.set(PREF_ERA, era)
    if disabled:
        preferences.set(PREF_ENABLED, False)

    resolver = PrefixResolver(preferences)
    try:
        resolver.load_file(db_path)
    except CaniuseError as exc:
        raise click.ClickException(str(exc)) from exc

    resolve = resolver.expand_property if expanded else resolver.resolve_prefixes
    results = [(identifier, resolve(identifier)) for identifier in identifiers]

    console = Console()
    console.print(
        render_results(results, expanded=expanded, era=preferences.get_string(PREF_ERA))
    )
