"""Confirm-then-delete workflow."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Protocol, Sequence

from branch_manager.git import DeletionError
from branch_manager.logging_config import get_logger
from branch_manager.output import Formatter

logger = get_logger(__name__)

CONFIRM = "yes"
CANCEL = "no"


class BranchDeleter(Protocol):
    def delete_branch(self, branch_name: str, force: bool = False) -> None: ...


class ConfirmResult(Enum):
    """How a confirm-and-delete run ended."""

    NOTHING_TO_DO = "nothing to do"
    CANCELLED = "cancelled"
    DELETED = "deleted"


@dataclass(frozen=True)
class DeletionOutcome:
    branch: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class DeletionReport:
    """Outcome of every attempted deletion, in attempt order."""

    outcomes: list[DeletionOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def deleted(self) -> list[str]:
        return [o.branch for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[tuple[str, str]]:
        return [(o.branch, o.error) for o in self.outcomes if not o.ok]


def _noun(count: int) -> str:
    return "branch" if count == 1 else "branches"


def filter_current(candidates: Sequence[str], current: Optional[str], formatter: Formatter) -> list[str]:
    """Drop the current branch from the candidates, telling the user if it was there."""
    filtered = [branch for branch in candidates if branch != current]
    if current and len(filtered) != len(candidates):
        formatter.status(f"Current branch ({current}) cannot be deleted.")
    return filtered


def confirm_deletion(formatter: Formatter, prompt: Callable[[str], str] = input) -> bool:
    """Ask until the user types exactly ``yes`` or ``no``.

    End of input counts as ``no``.
    """
    while True:
        formatter.warn(f"\nType '{CONFIRM}' to confirm deletion or '{CANCEL}' to cancel:")
        try:
            answer = prompt("").strip()
        except EOFError:
            answer = CANCEL
        formatter.console.print()
        if answer == CONFIRM:
            return True
        if answer == CANCEL:
            formatter.status("Deletion cancelled")
            return False
        logger.debug("Ignoring confirmation answer %r", answer)


def delete_branches(repo: BranchDeleter, branches: Sequence[str], force: bool, formatter: Formatter) -> DeletionReport:
    """Attempt every deletion; failures are recorded, not raised."""
    if len(branches) == 1:
        formatter.title(f"Deleting branch {branches[0]}...")
    else:
        formatter.title(f"Deleting {len(branches)} branches...")

    report = DeletionReport()
    for branch in branches:
        try:
            repo.delete_branch(branch, force=force)
        except DeletionError as err:
            logger.info("Could not delete %s: %s", branch, err)
            report.outcomes.append(DeletionOutcome(branch, str(err)))
            continue
        logger.info("Deleted %s", branch)
        formatter.info(f"Deleted branch {branch}")
        report.outcomes.append(DeletionOutcome(branch))
    return report


def print_report(report: DeletionReport, formatter: Formatter) -> None:
    if report.failed:
        formatter.failures(report.failed)

    formatter.status(f"{len(report.deleted)} out of {report.total} {_noun(report.total)} were deleted.")
    if report.failed:
        formatter.warn(f"{len(report.failed)} {_noun(len(report.failed))} were not deleted due to errors.")


def confirm_and_delete(
    repo: BranchDeleter,
    candidates: Sequence[str],
    current: Optional[str],
    force: bool,
    formatter: Formatter,
    prompt: Callable[[str], str] = input,
) -> tuple[ConfirmResult, Optional[DeletionReport]]:
    """Show the candidates, wait for confirmation and delete them.

    The current branch is never deleted. Returns how the run ended and,
    if deletions were attempted, their report.
    """
    branches = filter_current(candidates, current, formatter)
    if not branches:
        formatter.status("No branches to delete.")
        return ConfirmResult.NOTHING_TO_DO, None

    if len(branches) == 1:
        formatter.title("The following branch matches the pattern and will be deleted:")
    else:
        formatter.title("The following branches match the pattern and will be deleted:")
    for index, branch in enumerate(branches, start=1):
        formatter.info(f"{index:2d}. {branch}")

    if not confirm_deletion(formatter, prompt):
        return ConfirmResult.CANCELLED, None

    report = delete_branches(repo, branches, force, formatter)
    print_report(report, formatter)
    return ConfirmResult.DELETED, report
