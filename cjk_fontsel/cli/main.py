"""cjk-fontsel command - write the CJK generic family overrides."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from cjk_fontsel import __version__
from cjk_fontsel.aliases import Category, list_aliases, read_font_names
from cjk_fontsel.config import LOG_LEVELS, Config
from cjk_fontsel.exceptions import ConfigError, ReadFontNameError, WriteConfigError
from cjk_fontsel.log import setup_logging
from cjk_fontsel.paths import get_alias_dir, resolve_output_dir
from cjk_fontsel.template import generate_xml
from cjk_fontsel.writer import write_config

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
@click.argument("aliases", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--sys",
    "system_wide",
    is_flag=True,
    help="Write to /etc/fonts instead of the user fontconfig directory",
)
@click.option(
    "--alias-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Alias directory (default: 'aliases' next to the program)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error if the config file cannot be written",
)
@click.option("--dry-run", is_flag=True, help="Print the config instead of writing it")
@click.option("--list", "list_only", is_flag=True, help="List known aliases and exit")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default: WARNING)",
)
@click.version_option(__version__, prog_name="cjk-fontsel")
def cli(
    aliases: tuple[str, ...],
    system_wide: bool,
    alias_dir: Path | None,
    strict: bool,
    dry_run: bool,
    list_only: bool,
    config_file: Path | None,
    log_level: str | None,
) -> None:
    """Select the fonts used for the sans-serif, serif and monospace families.

    SANS SERIF MONOSPACE: alias names looked up in the sans, serif and
    monospace subdirectories of the alias directory.
    """
    try:
        config = Config.load(config_file)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1) from e

    setup_logging((log_level or config.log_level).upper())

    alias_root = alias_dir or config.alias_dir or get_alias_dir()

    if list_only:
        _print_aliases(alias_root)
        return

    if len(aliases) != 3:
        err_console.print(
            "[red]Error:[/red] The number of arguments is incorrect: "
            f"expected 3 but {len(aliases)} supplied."
        )
        raise SystemExit(1)

    try:
        selection = read_font_names(alias_root, *aliases, on_resolved=_print_font)
    except ReadFontNameError as e:
        err_console.print(
            f"[red]Error:[/red] encountered error while reading "
            f"{e.category} font: {escape(str(e))}"
        )
        if e.cause is not None:
            err_console.print(
                f"[red]Error:[/red] ... which was caused by "
                f"{type(e.cause).__name__}: {escape(str(e.cause))}"
            )
        raise SystemExit(1) from e

    document = generate_xml(selection.sans, selection.serif, selection.monospace)

    if dry_run:
        click.echo(document, nl=False)
        return

    output_dir = resolve_output_dir(system_wide or config.system_wide)
    try:
        path = write_config(output_dir, document)
    except WriteConfigError as e:
        err_console.print(
            "[red]Error:[/red] error while writing to language selector: "
            f"{escape(str(e))} ({escape(str(e.__cause__))})"
        )
        if strict or config.strict:
            raise SystemExit(1) from e
    else:
        logger.info("wrote %s", path)

    console.print("successfully set fonts.")


def _print_font(category: Category, name: str) -> None:
    console.print(f"{category.value:>10} font: {escape(name)}")


def _print_aliases(alias_root: Path) -> None:
    console.print(f"[bold]Alias directory:[/bold] {escape(str(alias_root))}")
    for category in Category:
        names = list_aliases(alias_root, category)
        if names:
            console.print(f"{category.value:>10}: {escape(', '.join(names))}")
        else:
            console.print(f"{category.value:>10}: [dim](none)[/dim]")
