"""Coverage annotation report generators.

Functions:
    build_report(document_path, annotations, coverage_path=None)  -> dict
    states_table()                                                -> list[dict]

The report is a JSON-ready dict with a per-state ``summary`` and the full
``annotations`` list in file order.
"""

from datetime import datetime, timezone

from covmark.models import (
    Annotation,
    CoverageState,
    state_label,
    state_style_token,
)


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #

def build_report(document_path, annotations: list[Annotation], coverage_path=None) -> dict:
    """Return a report dict for the annotations resolved on *document_path*."""
    return {
        "report_type": "coverage_annotations",
        "document": str(document_path),
        "coverage_file": str(coverage_path) if coverage_path is not None else None,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "summary": _build_summary(annotations),
        "annotations": [a.to_dict() for a in annotations],
    }


def states_table() -> list[dict]:
    """List every coverage state with its code, label and style token."""
    return [
        {
            "code":  state.value,
            "name":  state.name,
            "label": state_label(state),
            "style": state_style_token(state),
        }
        for state in CoverageState
    ]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #

def _build_summary(annotations: list[Annotation]) -> dict:
    # overlapping ranges are counted once per annotation
    by_state = {s.name: 0 for s in CoverageState}
    characters = {s.name: 0 for s in CoverageState}

    for annotation in annotations:
        by_state[annotation.state.name] += 1
        characters[annotation.state.name] += annotation.end - annotation.start

    return {
        "total":              len(annotations),
        "by_state":           by_state,
        "covered_characters": characters,
    }
