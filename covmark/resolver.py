"""Annotation resolver.

Functions:
    resolve_annotations(records, document_length)  -> list[Annotation]
    annotate(text, document_length)                -> list[Annotation]

Record offsets are zero-based; annotations use one-based document positions,
hence the fixed ``COORDINATE_SHIFT``. A document of ``n`` characters spans
positions ``1`` to ``n + 1`` (exclusive end), so an annotation may end at
``n + 1`` at most.
"""

from typing import Iterable

from covmark.models import Annotation, RawRecord, state_from_flag
from covmark.parser import parse_coverage_records

COORDINATE_SHIFT = 1


def _candidate(record: RawRecord, document_length: int) -> Annotation | None:
    """Return the shifted annotation for *record*, or None if it is dropped."""
    if record.length == 0:
        return None
    start = record.start + COORDINATE_SHIFT
    end = start + record.length
    if start < 0 or end > document_length + 1:
        return None
    return Annotation(start=start, end=end, state=state_from_flag(record.executed))


def resolve_annotations(records: Iterable[RawRecord], document_length: int) -> list[Annotation]:
    """Turn parsed records into bounds-checked annotations.

    Zero-length ranges and ranges reaching past the end of the document are
    silently dropped. Order and multiplicity of the remaining records are
    kept as-is; overlapping annotations are all returned.

    Raises:
        ValueError: if *document_length* is negative.
    """
    if document_length < 0:
        raise ValueError(f"document_length must be >= 0, got {document_length}")

    annotations: list[Annotation] = []
    for record in records:
        annotation = _candidate(record, document_length)
        if annotation is not None:
            annotations.append(annotation)
    return annotations


def annotate(text: str, document_length: int) -> list[Annotation]:
    """Parse coverage record *text* and resolve it in one step."""
    return resolve_annotations(parse_coverage_records(text), document_length)
