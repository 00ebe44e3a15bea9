"""Splits streams of unknown length into segments by a multi-byte
separator, one segment at a time."""
from ._exceptions import (  # noqa: F401
    InvalidArgument,
    SourceReadError,
    SplitError,
)
from ._utils import SplitterOptions, SplitterOptionsCtx  # noqa: F401
from .sources import IterableSource  # noqa: F401
from .splitter import SegmentKind, Splitter  # noqa: F401


__version__ = "1.0.0"
