"""Exception types raised by chromaline.

Each error also derives from the built-in exception a caller would expect
(``ValueError``, ``LookupError``), so generic handlers keep working.
"""


class ChromalineError(Exception):
    """Base class for all chromaline errors."""


class InvalidPointSpecError(ChromalineError, ValueError):
    """A point was specified with both, or neither, of its representations."""


class AnchorNotFoundError(ChromalineError, LookupError):
    """An anchor index or reference is not present in the palette."""


class DegenerateSegmentError(ChromalineError, ValueError):
    """A segment was requested with fewer than two points."""


class UnknownEasingError(ChromalineError, ValueError):
    """An easing name does not match any registered easing function."""
