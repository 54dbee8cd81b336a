"""Tests for covmark/report.py"""

from covmark.models import Annotation, CoverageState
from covmark.report import build_report, states_table

ANNOTATIONS = [
    Annotation(1, 11, CoverageState.EXECUTED),
    Annotation(5, 8, CoverageState.NOT_EXECUTED),
    Annotation(20, 22, CoverageState.EXECUTED),
]


class TestBuildReport:
    def test_report_type(self):
        assert build_report("foo.c", [])["report_type"] == "coverage_annotations"

    def test_document_and_coverage_file_present(self):
        result = build_report("foo.c", [], "foo.c.cov")
        assert result["document"] == "foo.c"
        assert result["coverage_file"] == "foo.c.cov"
        assert "generated_at" in result

    def test_summary_counts_by_state(self):
        summary = build_report("foo.c", ANNOTATIONS)["summary"]
        assert summary["total"] == 3
        assert summary["by_state"]["EXECUTED"] == 2
        assert summary["by_state"]["NOT_EXECUTED"] == 1
        assert summary["by_state"]["NOT_INSTRUMENTED"] == 0

    def test_summary_covered_characters(self):
        characters = build_report("foo.c", ANNOTATIONS)["summary"]["covered_characters"]
        assert characters["EXECUTED"] == 12
        assert characters["NOT_EXECUTED"] == 3

    def test_empty_summary(self):
        summary = build_report("foo.c", [])["summary"]
        assert summary["total"] == 0
        assert all(v == 0 for v in summary["by_state"].values())

    def test_annotations_in_order(self):
        result = build_report("foo.c", ANNOTATIONS)
        assert [(a["start"], a["end"]) for a in result["annotations"]] == [
            (1, 11), (5, 8), (20, 22),
        ]


def test_states_table_lists_every_state():
    table = states_table()
    assert [row["code"] for row in table] == list(range(7))
    assert table[2]["name"] == "EXECUTED"
    assert table[2]["style"] == "covmark-executed"
