"""Branch selection: keep-lists, wildcard patterns and index specs."""

from dataclasses import dataclass, field
from typing import Union

from branch_manager.git import BranchSnapshot
from branch_manager.logging_config import get_logger

logger = get_logger(__name__)

WILDCARD = "*"
INDEX_SPEC_CHARS = frozenset("0123456789,-")


@dataclass(frozen=True)
class KeepList:
    """Delete every branch except these."""

    names: tuple[str, ...]


@dataclass(frozen=True)
class Pattern:
    """Branch name with an optional leading and/or trailing ``*``.

    ``*foo*`` matches names containing ``foo``, ``*foo`` names ending with
    it, ``foo*`` names starting with it; ``foo`` matches only ``foo``.
    """

    text: str

    @property
    def leading_wildcard(self) -> bool:
        return self.text.startswith(WILDCARD)

    @property
    def trailing_wildcard(self) -> bool:
        return self.text.endswith(WILDCARD)

    @property
    def bare(self) -> str:
        return self.text.strip(WILDCARD)

    def matches(self, branch: str) -> bool:
        bare = self.bare
        if self.leading_wildcard and self.trailing_wildcard:
            return bare in branch
        if self.leading_wildcard:
            return branch.endswith(bare)
        if self.trailing_wildcard:
            return branch.startswith(bare)
        return branch == bare


@dataclass(frozen=True)
class IndexSpec:
    """1-based positions in the sorted branch list, e.g. ``2,4`` or ``1-3``."""

    text: str


SelectionRequest = Union[KeepList, Pattern, IndexSpec]


@dataclass
class Selection:
    """Branches chosen by a request, plus warnings about skipped tokens."""

    branches: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.branches)


def is_index_spec(argument: str) -> bool:
    """Whether a raw argument is made only of digits, commas and hyphens."""
    return bool(argument) and set(argument) <= INDEX_SPEC_CHARS


def parse_request(argument: str) -> SelectionRequest:
    """Route a ``delete`` argument to an index spec or a pattern."""
    if is_index_spec(argument):
        return IndexSpec(argument)
    return Pattern(argument)


def _parse_position(token: str, count: int) -> int:
    """Convert a 1-based index token into a 0-based position."""
    if not token.isdigit():
        raise ValueError(f"'{token}' is not a number")
    index = int(token)
    if not 1 <= index <= count:
        raise ValueError(f"index {index} is out of range (1-{count})")
    return index - 1


def _select_indexes(names: list[str], spec: str) -> Selection:
    selection = Selection()
    for token in spec.split(","):
        try:
            if "-" in token:
                start_token, _, end_token = token.partition("-")
                start = _parse_position(start_token, len(names))
                end = _parse_position(end_token, len(names))
                if start > end:
                    raise ValueError(f"range {token} is inverted")
                selection.branches.extend(names[start : end + 1])
            else:
                selection.branches.append(names[_parse_position(token, len(names))])
        except ValueError as err:
            warning = f"Skipping '{token}': {err}"
            logger.debug(warning)
            selection.warnings.append(warning)
    return selection


def select(snapshot: BranchSnapshot, request: SelectionRequest) -> Selection:
    """Compute the branches a request refers to.

    Keep-lists and patterns preserve the snapshot's order; index specs
    follow the order of their tokens and may repeat a branch. The current
    branch is not removed here.
    """
    if isinstance(request, KeepList):
        keep = set(request.names)
        return Selection([b for b in snapshot.branches if b and b not in keep])
    if isinstance(request, Pattern):
        return Selection([b for b in snapshot.branches if request.matches(b)])
    if isinstance(request, IndexSpec):
        return _select_indexes(snapshot.sorted(), request.text)
    raise TypeError(f"Unsupported selection request: {request!r}")
