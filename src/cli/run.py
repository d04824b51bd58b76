"""CLI commands."""
from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from src.variants.context import VariantContext
from src.variants.decomposer import decompose
from src.variants.header import synthesize_header
from src.variants.resolver import language_from_url

VERSION = "1.0.0"

app = typer.Typer(
    add_completion=False,
    help="Language variant resolver - map locale preferences to content variant codes",
)
console = Console()


class CLIState:
    """Options shared by all commands."""

    def __init__(self):
        self.mapping: Path | None = None
        self._context: VariantContext | None = None

    def reset(self, mapping: Path | None) -> None:
        self.mapping = mapping
        self._context = None

    @property
    def context(self) -> VariantContext:
        if self._context is None:
            self._context = VariantContext(mapping_path=self.mapping)
        return self._context


state = CLIState()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=verbose)],
        force=True,
    )


@app.callback()
def main(
    mapping: Path | None = typer.Option(
        None,
        "--mapping",
        "-m",
        help="Variant mapping JSON file (defaults to the bundled mapping)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Resolve OS locale preferences into content variant codes."""
    _configure_logging(verbose)
    state.reset(mapping)


@app.command()
def resolve(
    locale: str = typer.Argument(..., help="Locale identifier, e.g. zh-Hant-TW"),
) -> None:
    """Resolve a locale identifier to its variant code.

    Examples:
        langvariant resolve zh-Hant-TW
        langvariant resolve sr_RS
    """
    parts = decompose(locale)
    if not parts.has_language:
        console.print(f"[red]Error:[/red] '{locale}' has no recognizable language subtag.")
        raise typer.Exit(1)

    variant = state.context.resolve_variant(locale)
    if variant is None:
        console.print("-")
        raise typer.Exit(1)
    console.print(variant, markup=False)


@app.command()
def preferences(
    include_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Include languages without variants",
    ),
) -> None:
    """Show the preferred languages derived from the OS locale settings."""
    context = state.context
    raw = context.os_preferred_locales()
    codes = context.preferred_language_codes() if include_all else context.preferred_variant_languages()

    table = Table(title="Preferred languages", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Code", style="cyan")
    for position, code in enumerate(codes, start=1):
        table.add_row(str(position), code)

    console.print(f"[dim]OS locales:[/dim] {', '.join(raw) or '-'}")
    if codes:
        console.print(table)
    else:
        console.print("[yellow]No preferred languages resolved.[/yellow]")


@app.command()
def header(
    codes: list[str] | None = typer.Argument(
        None,
        help="Language codes in priority order (defaults to the OS preferences)",
    ),
) -> None:
    """Print the weighted Accept-Language header.

    Examples:
        langvariant header
        langvariant header en fr de
    """
    if codes:
        value = synthesize_header(codes)
    else:
        value = state.context.accept_language_header()
    console.print(value, markup=False)


@app.command("variant-for")
def variant_for(
    target: str = typer.Argument(..., help="Language code or wiki URL"),
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Language to use instead of the URL host",
    ),
    preferred: list[str] | None = typer.Option(
        None,
        "--preferred",
        "-p",
        help="Preferred variant codes in priority order (repeatable)",
    ),
) -> None:
    """Find the preferred variant for a language or wiki URL.

    Examples:
        langvariant variant-for zh
        langvariant variant-for https://zh.wikipedia.org/wiki/Main_Page
        langvariant variant-for zh -p zh-hant -p zh-hans
    """
    context = state.context
    if language_from_url(target) is not None or language:
        variant = context.preferred_variant_for_url(target, url_language=language, preferred=preferred or None)
    else:
        variant = context.preferred_variant(target, preferred=preferred or None)

    if variant is None:
        console.print("-")
        raise typer.Exit(1)
    console.print(variant, markup=False)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]langvariant[/bold] v{VERSION}")
    console.print("[dim]Content language variant resolver[/dim]")


if __name__ == "__main__":
    app()
