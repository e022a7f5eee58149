"""
Narrative Projector.

Describes every value of a document in plain language, one sentence per
line, indented two spaces per depth level:

    The root is a object with 2 items
      name is a string: "Ada"
      tags is an array with 1 item
        tags[0] is a string: "math"

Each sentence is split into segments tagged with a role so the
presentation layer can color type names and literal values. Unlike the
graph and outline, the narrative has no depth ceiling by default.
"""

import logging
from typing import Any, Iterable, List, Optional

from ..config import NARRATIVE_INDENT, NARRATIVE_MAX_DEPTH
from ..core.types import NarrativeSegment, SegmentRole, VisitRecord
from ..core.values import JsonType, stringify, truncate
from ..core.walker import walk
from .outline import items_phrase

logger = logging.getLogger(__name__)

NULL_PHRASE = "null or undefined"
NEWLINE = NarrativeSegment(text="\n")


def _plain(text: str) -> NarrativeSegment:
    return NarrativeSegment(text=text, role=SegmentRole.PLAIN)


def _type_name(text: str) -> NarrativeSegment:
    return NarrativeSegment(text=text, role=SegmentRole.TYPE_NAME)


def _literal(text: str) -> NarrativeSegment:
    return NarrativeSegment(text=text, role=SegmentRole.LITERAL_VALUE)


def describe(record: VisitRecord, truncate_at: Optional[int] = None) -> List[NarrativeSegment]:
    """Segments for one record, trailing newline included."""
    indent = NARRATIVE_INDENT * record.depth
    subject = "The root" if record.is_root else record.accessor

    if record.value_type.is_container:
        article = "n array" if record.value_type is JsonType.ARRAY else " object"
        return [
            _plain(f"{indent}{subject} is a"),
            _type_name(article),
            _plain(f" with {items_phrase(record.child_count)}"),
            NEWLINE,
        ]

    if record.value_type is JsonType.NULL:
        return [_plain(f"{indent}{subject} is "), _type_name(NULL_PHRASE), NEWLINE]

    text = truncate(stringify(record.value), truncate_at)
    if record.value_type is JsonType.STRING:
        text = f'"{text}"'
    return [
        _plain(f"{indent}{subject} is a "),
        _type_name(str(record.value_type)),
        _plain(": "),
        _literal(text),
        NEWLINE,
    ]


def project_narrative(
    value: Any,
    max_depth: Optional[int] = NARRATIVE_MAX_DEPTH,
    truncate_at: Optional[int] = None,
) -> List[NarrativeSegment]:
    segments: List[NarrativeSegment] = []
    for record in walk(value, max_depth=max_depth, value_text_limit=None):
        segments.extend(describe(record, truncate_at))
    logger.debug(f"Projected narrative: {len(segments)} segments")
    return segments


def narrative_text(segments: Iterable[NarrativeSegment]) -> str:
    return "".join(segment.text for segment in segments)
