"""Source annotation: loops, enclosing ranges, positions and line flags."""

from .annotator import AnnotationPass, AnnotationSummary, SourceAnnotator, annotate
from .filters import interesting, is_interesting_op
from .locator import range_of
from .loops import find_loops, loop_of
from .positions import column_of, display_range, line_of, line_text, offset_of

__all__ = [
    "AnnotationPass",
    "AnnotationSummary",
    "SourceAnnotator",
    "annotate",
    "column_of",
    "display_range",
    "find_loops",
    "interesting",
    "is_interesting_op",
    "line_of",
    "line_text",
    "loop_of",
    "offset_of",
    "range_of",
]
