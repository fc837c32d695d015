"""Main CLI application entry point.

Defines the Typer application, its options, and the console script
entry point that maps every fatal condition to exit status 1.
"""

import importlib
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Annotated

import typer

from mimels import __version__
from mimels.classifiers.libmagic import MagicClassifier
from mimels.core.config import load_config_file, resolve_settings
from mimels.core.emitter import SortedEmitter
from mimels.core.index import AggregationIndex
from mimels.core.paths import APP_NAME
from mimels.errors import MimelsError
from mimels.filesystem.driver import TraversalDriver
from mimels.filesystem.policy import EntryPolicy
from mimels.utils.formatting import print_error, setup_logging

# Plain Click help text so --help can be sent to stderr
app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    rich_markup_mode=None,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{APP_NAME} version {__version__}")
        raise typer.Exit()


def help_callback(ctx: typer.Context, value: bool) -> None:
    """Print usage to stderr and exit with failure status."""
    if value:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=1)


@app.command(context_settings={"help_option_names": []})
def list_by_type(
    roots: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[FILE]...",
            help="Paths to list (the current directory by default).",
            show_default=False,
        ),
    ] = None,
    all_entries: Annotated[
        bool,
        typer.Option("--all", "-a", help="Do not ignore entries starting with '.'."),
    ] = False,
    mime: Annotated[
        bool,
        typer.Option("--mime", "-m", help="Output using the format '<mime>: <file>'."),
    ] = False,
    null: Annotated[
        bool,
        typer.Option("--null", "-0", help="Use null instead of new-line to separate lines."),
    ] = False,
    ignore_inaccessible: Annotated[
        bool,
        typer.Option(
            "--ignore-inaccessible",
            "-i",
            help="Warn instead of failing on paths that cannot be accessed.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Read defaults from this config file.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    show_help: Annotated[
        bool | None,
        typer.Option(
            "--help",
            callback=help_callback,
            is_eager=True,
            expose_value=False,
            help="Display this help and exit.",
        ),
    ] = None,
) -> None:
    """List FILEs recursively, sorted by content type.

    Every regular file and symbolic link under the given paths is
    printed, grouped by its MIME type, groups in ascending order.
    """
    setup_logging(verbose)

    try:
        settings = resolve_settings(
            load_config_file(config_path),
            mime=mime,
            null=null,
            show_all=all_entries,
            ignore_inaccessible=ignore_inaccessible,
        )
        classifier = MagicClassifier(settings.magic_file)
        index = AggregationIndex(settings.bucket_order)

        driver = TraversalDriver(settings, EntryPolicy(settings, classifier), index)
        driver.scan(roots or [])

        SortedEmitter(settings).emit(index, sys.stdout.buffer)
    except MimelsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except BrokenPipeError:
        # Reader closed the pipe, e.g. `mimels | head`
        _discard_stdout()
        raise typer.Exit(code=1) from None


def _discard_stdout() -> None:
    """Point stdout at the null device so the flush at exit cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def _click_exceptions() -> ModuleType:
    """Return the exceptions module of the Click build typer runs on.

    Recent typer releases bundle their own copy of Click, so the classes
    raised for usage errors are found through the command class.
    """
    command_cls = type(typer.main.get_command(app))
    for cls in command_cls.__mro__:
        if cls.__name__ == "Command" and cls.__module__ != command_cls.__module__:
            package = cls.__module__.rpartition(".")[0]
            return importlib.import_module(f"{package}.exceptions")
    raise RuntimeError(f"Cannot locate Click for {command_cls.__name__}")


def main(argv: list[str] | None = None) -> None:
    """Console script entry point.

    Invalid options are reported without printing usage, and every
    failure exits with status 1.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].
    """
    errors = _click_exceptions()

    try:
        rv = app(args=argv, prog_name=APP_NAME, standalone_mode=False)
    except errors.NoSuchOption as e:
        print_error(f"Invalid parameter: {e.option_name}")
        sys.exit(1)
    except errors.UsageError as e:
        print_error(e.format_message())
        sys.exit(1)
    except typer.Abort:
        sys.exit(1)

    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    main()
