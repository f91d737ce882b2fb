"""Test configuration and fixtures."""

from io import StringIO
from pathlib import Path
from typing import Generator

import pytest
from git import Actor, Repo
from rich.console import Console

from branch_manager.output import Formatter


@pytest.fixture
def test_env(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a local repository with a spread of branches.

    Branches (current is ``main``):
    - feature/merged: one commit, merged into main with a merge commit
    - feature/unmerged: one commit not on main
    - other, test-a, test-b: point at main, no commits of their own
    """
    local_path = tmp_path / "local"
    local_path.mkdir()
    local_repo = Repo.init(local_path)

    # Set up git config
    author = Actor("Test User", "test@example.com")
    local_repo.config_writer().set_value("user", "name", author.name).release()
    local_repo.config_writer().set_value("user", "email", author.email).release()

    readme = local_path / "README.md"
    readme.write_text("# Test Repository")
    local_repo.index.add(["README.md"])
    local_repo.index.commit("Initial commit", author=author)

    # Whatever init.defaultBranch says, call it main
    local_repo.git.branch("-M", "main")
    main_branch = local_repo.heads.main

    def create_branch(name: str, merge: bool = False) -> None:
        """Create a branch with one commit of its own."""
        main_branch.checkout()
        branch = local_repo.create_head(name)
        branch.checkout()

        file_name = name.replace("/", "_") + ".txt"
        (local_path / file_name).write_text(f"{name} content")
        local_repo.index.add([file_name])
        local_repo.index.commit(f"Add {name}", author=author)

        main_branch.checkout()
        if merge:
            local_repo.git.merge(name, "--no-ff")

    create_branch("feature/merged", merge=True)
    create_branch("feature/unmerged")
    for name in ("other", "test-a", "test-b"):
        local_repo.create_head(name, "main")

    main_branch.checkout()

    yield local_path


@pytest.fixture
def formatter() -> Formatter:
    """Formatter writing plain text into a buffer."""
    return Formatter(console=Console(file=StringIO(), width=200))
