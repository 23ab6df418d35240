"""Domain layer: constants, errors and segment schemas."""

from .errors import EditorError, ErrorCodes, SegmentEditError, TemplateError
from .segments import (
    CodeSegment,
    Segment,
    TextSegment,
    segment_from_dict,
    segments_from_list,
    segments_to_list,
)

__all__ = [
    "EditorError",
    "ErrorCodes",
    "SegmentEditError",
    "TemplateError",
    "CodeSegment",
    "Segment",
    "TextSegment",
    "segment_from_dict",
    "segments_from_list",
    "segments_to_list",
]
