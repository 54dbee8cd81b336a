"""Data models for coverage annotations.

Contains the value objects passed between the parser, the resolver and the
presentation layer:
    - CoverageState   closed enumeration, value = legacy numeric code
    - RawRecord       one parsed line of a coverage record file
    - Annotation      resolved (range, state) pair, one-based half-open range

A CoverageSet is a plain ``list[Annotation]`` kept in file order.
"""

from dataclasses import dataclass
from enum import Enum


class CoverageState(Enum):
    NOT_INSTRUMENTED = 0
    CONDITIONALIZED_OUT = 1
    EXECUTED = 2
    NOT_EXECUTED = 3
    BOTH_BRANCHES_TAKEN = 4
    ONE_BRANCH_TAKEN = 5
    NEITHER_BRANCH_TAKEN = 6


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

_LABELS: dict[CoverageState, str] = {
    CoverageState.NOT_INSTRUMENTED:     "Not instrumented",
    CoverageState.CONDITIONALIZED_OUT:  "Conditionalized out",
    CoverageState.EXECUTED:             "Executed",
    CoverageState.NOT_EXECUTED:         "Not executed",
    CoverageState.BOTH_BRANCHES_TAKEN:  "Both branches taken",
    CoverageState.ONE_BRANCH_TAKEN:     "One branch taken",
    CoverageState.NEITHER_BRANCH_TAKEN: "Neither branch taken",
}

_STYLE_TOKENS: dict[CoverageState, str] = {
    CoverageState.NOT_INSTRUMENTED:     "covmark-not-instrumented",
    CoverageState.CONDITIONALIZED_OUT:  "covmark-conditionalized-out",
    CoverageState.EXECUTED:             "covmark-executed",
    CoverageState.NOT_EXECUTED:         "covmark-not-executed",
    CoverageState.BOTH_BRANCHES_TAKEN:  "covmark-both-branches-taken",
    CoverageState.ONE_BRANCH_TAKEN:     "covmark-one-branch-taken",
    CoverageState.NEITHER_BRANCH_TAKEN: "covmark-neither-branch-taken",
}


def state_from_code(code) -> CoverageState:
    """Return the state for a numeric code (int or ASCII digit string).

    Unknown or unparsable codes fall back to ``NOT_INSTRUMENTED``.
    """
    if isinstance(code, str) and code.isascii() and code.isdigit():
        code = int(code)
    if not isinstance(code, int) or isinstance(code, bool):
        return CoverageState.NOT_INSTRUMENTED
    try:
        return CoverageState(code)
    except ValueError:
        return CoverageState.NOT_INSTRUMENTED


def state_from_flag(executed: bool) -> CoverageState:
    return CoverageState.EXECUTED if executed else CoverageState.NOT_EXECUTED


def state_label(state: CoverageState) -> str:
    """Human-readable label, used for tooltips and reports."""
    return _LABELS[state]


def state_style_token(state) -> str:
    """Presentation identifier for *state*.

    Accepts a ``CoverageState`` or a bare numeric code; unknown codes get the
    ``NOT_INSTRUMENTED`` token.
    """
    if not isinstance(state, CoverageState):
        state = state_from_code(state)
    return _STYLE_TOKENS[state]


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RawRecord:
    kind: str
    executed: bool
    start: int
    length: int


@dataclass(frozen=True)
class Annotation:
    start: int
    end: int
    state: CoverageState

    @property
    def range(self) -> tuple[int, int]:
        return (self.start, self.end)

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end":   self.end,
            "state": self.state.name,
            "label": state_label(self.state),
            "style": state_style_token(self.state),
        }
