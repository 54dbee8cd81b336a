"""Coverage record parser.

Usage:
    records = list(parse_coverage_records(text))

Each physical line may carry one record of the form ``TAG:FLAG,START,LEN``
(e.g. ``BRANCH:T,10,5``). The match is not anchored, so leading and trailing
commentary on a line is ignored. Lines without a record are skipped.
"""

import re
from typing import Iterator

from covmark.models import RawRecord

_RECORD_RE = re.compile(r"([A-Z]+):(T|NIL),([0-9]+),([0-9]+)")

_FLAGS = {"T": True, "NIL": False}

# only real line terminators; form feeds and Unicode separators stay inside a line
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def parse_record(line: str) -> RawRecord | None:
    """Return the first record found in *line*, or None."""
    match = _RECORD_RE.search(line)
    if match is None:
        return None
    kind, flag, start, length = match.groups()
    return RawRecord(
        kind=kind,
        executed=_FLAGS[flag],
        start=int(start),
        length=int(length),
    )


def parse_coverage_records(text: str) -> Iterator[RawRecord]:
    """Yield one RawRecord per line of *text* that contains a record."""
    for line in _LINE_BREAK_RE.split(text):
        record = parse_record(line)
        if record is not None:
            yield record
