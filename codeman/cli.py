"""codeman CLI — the main entry point."""

import logging
import os
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from codeman import __version__
from codeman.config import ScanConfig, load_config
from codeman.models.language import all_extensions, language_from_name, language_names

err_console = Console(stderr=True, soft_wrap=True, highlight=False)


@click.group()
@click.version_option(version=__version__)
def main():
    """codeman — find the code directories in a tree.

    A code directory holds at least one source file of the requested
    language(s). Found directories are reported and not searched further.
    """


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _display_path(path: Path, root: Path, dir_arg: str) -> str:
    """Spell ``path`` under DIR exactly as the user typed it (``./root/proj``)."""
    return os.path.join(dir_arg, str(path.relative_to(root)))


# ── List ─────────────────────────────────────────────────────────────


@main.command(name="list")
@click.argument("dir")
@click.option(
    "--lang", "-l", default=None,
    help=f"The programming language to search for ({', '.join(language_names())})",
)
@click.option("--git", "-g", "git", is_flag=True, help="Only show directories that are git repositories")
@click.option(
    "--config", "-c", "config_path", default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML scan configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Log the walk to stderr")
def list_dirs(dir: str, lang: str | None, git: bool, config_path: str | None, verbose: bool):
    """List all code directories in DIR."""
    from codeman.utils.file_scanner import find_code_directories

    _setup_logging(verbose)

    config = ScanConfig()
    if config_path:
        try:
            config = load_config(config_path)
        except (ValueError, yaml.YAMLError) as e:
            raise click.BadParameter(str(e), param_hint="--config")

    if lang is not None:
        language = language_from_name(lang)
        if language is None:
            err_console.print(f"[red]Invalid language: {escape(lang)}[/]")
            return
        extensions = language.extensions
    else:
        extensions = all_extensions()

    root = Path(dir)
    if not root.is_dir():
        err_console.print(f"[red]{escape(dir)} is not a directory[/]")
        return

    code_dirs = find_code_directories(root, extensions, require_git=git, config=config)

    for code_dir in code_dirs:
        line = code_dir.render(_display_path(code_dir.path, root, dir))
        if git and code_dir.has_git and config.show_status:
            from codeman.utils.git_ops import get_git_status

            status = get_git_status(code_dir.path)
            if status is not None:
                line = f"{line} {status.render()}"
        click.echo(line)


if __name__ == "__main__":
    main()
