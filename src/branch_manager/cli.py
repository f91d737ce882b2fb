"""Command line interface for git-branch-manager."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print

from branch_manager import __version__
from branch_manager.deletion import confirm_and_delete
from branch_manager.git import BranchSnapshot, GitError, GitRepo
from branch_manager.logging_config import get_logger, setup_logging
from branch_manager.output import Formatter
from branch_manager.selection import KeepList, SelectionRequest, parse_request, select

app = typer.Typer(help="List local git branches and delete them in bulk")
logger = get_logger(__name__)

PathOption = Annotated[Path, typer.Option(help="Path to git repository")]
ForceOption = Annotated[bool, typer.Option("--force", "-f", help="Force deletion of unmerged branches")]


def get_repo(path: Path) -> GitRepo:
    """Get git repository instance."""
    try:
        return GitRepo(path)
    except GitError as err:
        print(f"Error: {err}")
        raise typer.Exit(code=1) from err


def get_snapshot(repo: GitRepo) -> BranchSnapshot:
    """Enumerate branches, exiting on failure."""
    try:
        return repo.get_snapshot()
    except GitError as err:
        print(f"Error: {err}")
        raise typer.Exit(code=1) from err


def _version_callback(value: bool) -> None:
    if value:
        print(f"gbm {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show progress messages")] = False,
    debug: Annotated[bool, typer.Option(help="Show debug messages, including git commands")] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """List local git branches and delete them in bulk."""
    setup_logging(verbose=verbose, debug=debug)


@app.command("list")
def list_branches(
    path: PathOption = Path("."),
    plain: Annotated[bool, typer.Option(help="Print bare branch names only")] = False,
) -> None:
    """List branches sorted by name, numbered for use with `gbm delete`."""
    repo = get_repo(path)
    snapshot = get_snapshot(repo)
    formatter = Formatter()

    branches = snapshot.sorted()
    if plain:
        for branch in branches:
            formatter.plain(branch)
        return

    if not branches:
        formatter.status("No branches found.")
        return

    formatter.title("Branch" if len(branches) == 1 else "Branches")
    for index, branch in enumerate(branches, start=1):
        marker = " (current)" if branch == snapshot.current else ""
        formatter.info(f"{index:2d}. {branch}{marker}")


def _run_selection(path: Path, request: SelectionRequest, force: bool) -> None:
    repo = get_repo(path)
    snapshot = get_snapshot(repo)
    formatter = Formatter()

    selection = select(snapshot, request)
    for warning in selection.warnings:
        formatter.warn(warning)

    if not selection and not isinstance(request, KeepList):
        formatter.status("No branches match the given pattern.")
        return

    logger.info("Selected %d branch(es) with %r", len(selection.branches), request)
    confirm_and_delete(repo, selection.branches, snapshot.current, force, formatter)


@app.command()
def keep(
    names: Annotated[list[str], typer.Argument(help="Branches to keep")],
    force: ForceOption = False,
    path: PathOption = Path("."),
) -> None:
    """Delete every branch except the given ones and the current branch."""
    _run_selection(path, KeepList(tuple(names)), force)


@app.command()
def delete(
    pattern: Annotated[str, typer.Argument(help="Branch name with optional leading/trailing *, or indexes like 1,3-5")],
    force: ForceOption = False,
    path: PathOption = Path("."),
) -> None:
    """Delete branches matching a pattern or the numbers shown by `gbm list`."""
    _run_selection(path, parse_request(pattern), force)


@app.command("Keep", hidden=True)
def force_keep(
    names: Annotated[list[str], typer.Argument(help="Branches to keep")],
    path: PathOption = Path("."),
) -> None:
    """Same as `keep --force`."""
    _run_selection(path, KeepList(tuple(names)), force=True)


@app.command("Delete", hidden=True)
def force_delete(
    pattern: Annotated[str, typer.Argument(help="Branch name with optional leading/trailing *, or indexes like 1,3-5")],
    path: PathOption = Path("."),
) -> None:
    """Same as `delete --force`."""
    _run_selection(path, parse_request(pattern), force=True)


if __name__ == "__main__":
    app()
