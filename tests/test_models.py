"""Tests for covmark/models.py"""

import dataclasses

import pytest

from covmark.models import (
    Annotation,
    CoverageState,
    RawRecord,
    state_from_code,
    state_from_flag,
    state_label,
    state_style_token,
)


def test_seven_states():
    assert len(CoverageState) == 7


@pytest.mark.parametrize("state", list(CoverageState))
def test_every_state_has_label_and_style(state):
    assert state_label(state)
    assert state_style_token(state).startswith("covmark-")


def test_labels_and_styles_are_distinct():
    assert len({state_label(s) for s in CoverageState}) == 7
    assert len({state_style_token(s) for s in CoverageState}) == 7


# ---------------------------------------------------------------------------
# Code / flag mapping
# ---------------------------------------------------------------------------

def test_known_codes_map_to_states():
    assert state_from_code(2) is CoverageState.EXECUTED
    assert state_from_code("6") is CoverageState.NEITHER_BRANCH_TAKEN


@pytest.mark.parametrize("code", [7, -1, 99, "x", None, 2.5, True, False, " 3 ", "\u0663", "-1"])
def test_unknown_codes_default_to_not_instrumented(code):
    assert state_from_code(code) is CoverageState.NOT_INSTRUMENTED


def test_style_token_for_unknown_code_is_not_instrumented_token():
    expected = state_style_token(CoverageState.NOT_INSTRUMENTED)
    assert state_style_token(42) == expected
    assert state_style_token(3) == state_style_token(CoverageState.NOT_EXECUTED)


def test_flag_mapping():
    assert state_from_flag(True) is CoverageState.EXECUTED
    assert state_from_flag(False) is CoverageState.NOT_EXECUTED


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

def test_value_objects_are_immutable():
    record = RawRecord("BRANCH", True, 1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.start = 5  # type: ignore[misc]


def test_annotation_to_dict():
    d = Annotation(11, 16, CoverageState.EXECUTED).to_dict()
    assert d == {
        "start": 11,
        "end": 16,
        "state": "EXECUTED",
        "label": "Executed",
        "style": "covmark-executed",
    }


def test_style_token_rejects_non_integer_codes():
    expected = state_style_token(CoverageState.NOT_INSTRUMENTED)
    assert state_style_token(2.5) == expected
    assert state_style_token(True) == expected
