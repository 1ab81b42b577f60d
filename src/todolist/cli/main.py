"""CLI entry point for todolist.

Invoked as::

    todo [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m todolist.cli.main

Commands
--------
list, l             Print all todos
new, n TITLE        Add a new todo
complete, c ID      Mark a todo as completed
uncomplete, uc ID   Mark a todo as pending again
delete, d ID        Remove a todo
help, h             Show the command overview

``ID`` is the 1-based number printed by ``list``.  Every failure is
reported on stdout as ``Error: ...`` and the process still exits with
status 0.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from todolist import __version__
from todolist.config import TodoConfig, load_config
from todolist.errors import TodoError
from todolist.model import Todo, TodoSerializer
from todolist.operations import Confirm, DeletePolicy, TodoService
from todolist.storage import JsonFileStorage

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True)

ALIASES: dict[str, str] = {
    "l": "list",
    "n": "new",
    "c": "complete",
    "uc": "uncomplete",
    "d": "delete",
    "h": "help",
}

_YES_ANSWERS = frozenset({"y", "yes"})


def _print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("todolist")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


def _make_service(config: TodoConfig, confirm: Confirm | None = None) -> TodoService:
    return TodoService(
        JsonFileStorage(config.file),
        delete_policy=config.delete_policy,
        confirm=confirm,
    )


def _prompt_confirm(todo: Todo) -> bool:
    """Ask on the terminal whether a pending todo may be deleted."""
    answer = click.prompt(
        f'Todo "{todo.title}" is not completed. Delete anyway? [y/N]',
        default="",
        show_default=False,
        prompt_suffix=" ",
    )
    return answer.strip().lower() in _YES_ANSWERS


class TodoId(click.ParamType):
    """A 1-based todo number, converted to a 0-based index."""

    name = "id"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            self.fail(f"{value!r} is not a valid todo ID", param, ctx)
        number = int(text)
        if number < 1:
            self.fail(f"todo ID must be a positive integer, got {number}", param, ctx)
        return number - 1


class AliasedGroup(click.Group):
    """Click group that resolves short command aliases.

    Unknown commands fall back to ``help``, and ``main`` turns every
    error into a printed message with exit status 0.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if self.get_command(ctx, args[0]) is None and not ctx.resilient_parsing:
            console.print(f"Unknown command: {args[0]}", markup=False)
            return "help", self.get_command(ctx, "help"), []
        _, cmd, remaining = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, remaining

    def main(  # type: ignore[override]
        self,
        args: list[str] | None = None,
        prog_name: str | None = None,
        complete_var: str | None = None,
        standalone_mode: bool = True,
        **extra: Any,
    ) -> Any:
        result = None
        try:
            result = super().main(
                args, prog_name, complete_var, standalone_mode=False, **extra
            )
        except TodoError as exc:
            _print_error(str(exc))
        except click.exceptions.Abort:
            _print_error("aborted")
        except click.ClickException as exc:
            _print_error(exc.format_message())
        if standalone_mode:
            sys.exit(0)
        return result


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todo")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TODO_FILE",
    default=None,
    help="Todo file to use (default: ./todos.json).",
)
@click.option(
    "--delete-policy",
    type=click.Choice([policy.value for policy in DeletePolicy], case_sensitive=False),
    envvar="TODO_DELETE_POLICY",
    default=None,
    help="How deleting a pending todo is handled.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TODO_CONFIG",
    default=None,
    help="YAML config file with 'file' and 'delete_policy' keys.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    file_path: Path | None,
    delete_policy: str | None,
    config_file: Path | None,
    verbose: bool,
) -> None:
    """Manage a todo list stored in a local JSON file."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        _print_error("no arguments provided, please provide at least one argument")
        return
    ctx.obj = load_config(config_file, path=file_path, delete_policy=delete_policy)


# ---------------------------------------------------------------------------
# list command
# ---------------------------------------------------------------------------


@cli.command(name="list")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@click.pass_obj
def list_command(config: TodoConfig, output_format: str) -> None:
    """Print all todos (alias: l)."""
    todos = _make_service(config).list()

    if output_format == "json":
        console.print(TodoSerializer().to_json(todos), markup=False)
    elif output_format == "yaml":
        console.print(TodoSerializer().to_yaml(todos), markup=False, end="")
    else:
        for position, todo in enumerate(todos, start=1):
            console.print(todo.display(position), markup=False)


# ---------------------------------------------------------------------------
# new command
# ---------------------------------------------------------------------------


@cli.command(name="new")
@click.argument("title", nargs=-1, required=True)
@click.pass_obj
def new_command(config: TodoConfig, title: tuple[str, ...]) -> None:
    """Add a new todo titled TITLE (alias: n).

    Several words are joined with single spaces.
    """
    todo = _make_service(config).create(" ".join(title))
    console.print(f"Successfully created a new todo: {escape(todo.title)}")


# ---------------------------------------------------------------------------
# complete / uncomplete commands
# ---------------------------------------------------------------------------


@cli.command(name="complete")
@click.argument("todo_id", metavar="ID", type=TodoId())
@click.pass_obj
def complete_command(config: TodoConfig, todo_id: int) -> None:
    """Mark todo number ID as completed (alias: c)."""
    todo = _make_service(config).complete(todo_id)
    console.print(todo.display(todo_id + 1), markup=False)


@cli.command(name="uncomplete")
@click.argument("todo_id", metavar="ID", type=TodoId())
@click.pass_obj
def uncomplete_command(config: TodoConfig, todo_id: int) -> None:
    """Mark todo number ID as not completed (alias: uc)."""
    todo = _make_service(config).uncomplete(todo_id)
    console.print(todo.display(todo_id + 1), markup=False)


# ---------------------------------------------------------------------------
# delete command
# ---------------------------------------------------------------------------


@cli.command(name="delete")
@click.argument("todo_id", metavar="ID", type=TodoId())
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    default=False,
    help="Answer yes when asked to delete a pending todo.",
)
@click.pass_obj
def delete_command(config: TodoConfig, todo_id: int, yes: bool) -> None:
    """Remove todo number ID (alias: d).

    A todo that is not completed is only removed when the delete policy
    is 'confirm' and the prompt is answered with yes.
    """
    confirm: Confirm = (lambda todo: True) if yes else _prompt_confirm
    todo = _make_service(config, confirm=confirm).delete(todo_id)
    console.print(f"Deleted todo: {escape(todo.title)}")


# ---------------------------------------------------------------------------
# help command
# ---------------------------------------------------------------------------


@cli.command(name="help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show this overview (alias: h)."""
    parent = ctx.parent if ctx.parent is not None else ctx
    console.print(parent.get_help(), markup=False)


def main(argv: list[str] | None = None) -> None:
    """Console-script entry point."""
    cli.main(args=argv, prog_name="todo")


if __name__ == "__main__":
    main()
