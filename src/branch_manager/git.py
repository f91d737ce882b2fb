"""Git repository operations."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

from branch_manager.logging_config import get_logger

logger = get_logger(__name__)

CURRENT_MARKER = "*"
WORKTREE_MARKER = "+"


class GitError(Exception):
    """Git operation error."""


class DeletionError(GitError):
    """A single branch could not be deleted."""

    def __init__(self, branch: str, message: str) -> None:
        """Initialize error.

        Args:
            branch: Name of the branch git refused to delete
            message: Diagnostic text reported by git
        """
        super().__init__(message)
        self.branch = branch


@dataclass(frozen=True)
class BranchSnapshot:
    """Local branches and the checked-out branch at one point in time."""

    branches: tuple[str, ...]
    current: Optional[str] = None

    def sorted(self) -> list[str]:
        """Branch names in the order shown by ``list``."""
        return sorted(self.branches)

    def __len__(self) -> int:
        return len(self.branches)


def _is_detached_head(entry: str) -> bool:
    # git prints e.g. "(HEAD detached at 1a2b3c4)" or "(no branch, rebasing foo)"
    return entry.startswith("(") and entry.endswith(")")


def parse_branch_listing(output: str) -> BranchSnapshot:
    """Parse the text printed by ``git branch``.

    The checked-out branch is prefixed with ``* ``; branches checked out in
    another worktree are prefixed with ``+ ``. Blank lines are ignored.
    """
    branches: list[str] = []
    current: Optional[str] = None

    for line in output.splitlines():
        entry = line.strip()
        if entry.startswith(CURRENT_MARKER):
            entry = entry[len(CURRENT_MARKER) :].strip()
            if _is_detached_head(entry):
                continue
            current = entry or None
        elif entry.startswith(WORKTREE_MARKER + " "):
            entry = entry[len(WORKTREE_MARKER) :].strip()

        if entry:
            branches.append(entry)

    return BranchSnapshot(branches=tuple(branches), current=current)


class GitRepo:
    """Git repository operations."""

    def __init__(self, path: Path) -> None:
        """Initialize repository."""
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
            if self.repo.bare:
                raise GitError("Cannot operate on bare repository")
        except (GitCommandError, ValueError, InvalidGitRepositoryError, NoSuchPathError) as err:
            raise GitError(f"Failed to open repository: {err}") from err
        logger.debug("Opened repository at %s", self.repo.working_tree_dir)

    def get_snapshot(self) -> BranchSnapshot:
        """Enumerate local branches and the current branch.

        Raises:
            GitError: If git cannot be run or exits with a non-zero status
        """
        try:
            # One branch per line, whatever color.* and column.* say
            output = self.repo.git.branch("--no-color", "--no-column")
        except (GitCommandError, GitCommandNotFound) as err:
            raise GitError(f"Failed to list branches: {err}") from err

        snapshot = parse_branch_listing(output)
        logger.info("Found %d branch(es), current: %s", len(snapshot), snapshot.current or "-")
        return snapshot

    def delete_branch(self, branch_name: str, force: bool = False) -> None:
        """Delete a local branch.

        Safe deletion (``-d``) is refused by git when the branch holds work
        that is not merged elsewhere; forced deletion (``-D``) is not.

        Raises:
            DeletionError: If git reports a failure for this branch
        """
        flag = "-D" if force else "-d"
        logger.debug("Running git branch %s %s", flag, branch_name)
        try:
            status, stdout, stderr = self.repo.git.branch(
                flag,
                branch_name,
                with_extended_output=True,
                with_exceptions=False,
            )
        except GitCommandNotFound as err:
            raise DeletionError(branch_name, str(err)) from err

        if status != 0:
            message = (stderr or stdout).strip() or f"git exited with status {status}"
            raise DeletionError(branch_name, message)
