"""
Splits a readable stream into segments delimited by a separator without
reading the whole stream into memory.

>>> splitter = Splitter(io.BytesIO(b"a,,b,,c"), b",,")
>>> list(splitter)
[b'a', b'b', b'c']

Segments never contain separator bytes. A stream which starts with the
separator yields an empty first segment, an empty stream yields exactly one
empty segment.
"""
import logging
import typing as t
import warnings
from enum import Enum

from ._exceptions import InvalidArgument, SourceReadError
from ._search import SeparatorSearch
from ._utils import SplitterOptionsCtx, normalize_separator


logger = logging.getLogger(__name__)


class SegmentKind(Enum):
    """Describes what a segment is bounded by"""

    PREFIX = "prefix"  # stream start .. first separator
    MATCH = "match"  # separator .. separator
    SUFFIX = "suffix"  # separator or stream start .. end of data


class Splitter:
    """Forward-only iterator over segments of a stream.

    The source is anything with ``read(size)``, which returns an empty chunk
    at the end of data: binary files, ``io.BytesIO``, ``IterableSource``.
    Text sources work too if the separator is ``str``.

    Segments can be either materialized:

    >>> for segment in Splitter(f, b"\\r\\n\\r\\n"):
    >>>     process(segment)

    or streamed into any object with ``write`` method, so the splitter never
    holds a whole segment in memory:

    >>> splitter = Splitter(f, b"\\x00\\x00")
    >>> while splitter.next_to_sink(f_out) is not None:
    >>>     f_out.write(b"\\n")

    Any exception raised by the source, as well as a chunk of wrong type
    (e.g. ``str`` for a bytes separator), is raised as ``SourceReadError``;
    after that the splitter is unusable.
    """

    def __init__(
        self, source, separator, chunk_size: "t.Optional[int]" = None
    ):
        """Init self.

        Args:
          source: object with ``read(size)`` method
          separator: non-empty bytes-like object (or iterable of ints),
            ``str`` for text sources
          chunk_size: (optional) number of bytes to request per read,
            defaults to ``SplitterOptionsCtx`` ``chunk_size`` option
        """
        try:
            separator = normalize_separator(separator)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(
                f"unsupported separator: {separator!r}"
            ) from e
        if not separator:
            raise InvalidArgument("separator has to be non-empty")

        if chunk_size is None:
            chunk_size = SplitterOptionsCtx.get_option_value("chunk_size")
        if (
            not isinstance(chunk_size, int)
            or isinstance(chunk_size, bool)
            or chunk_size <= 0
        ):
            raise InvalidArgument("chunk_size has to be positive int")
        if chunk_size < len(separator):
            warnings.warn(
                "chunk_size is smaller than the separator, every match takes "
                "multiple reads",
                stacklevel=2,
            )

        self.source = source
        self.separator = separator
        self.chunk_size = chunk_size
        self.last_kind: "t.Optional[SegmentKind]" = None

        self._search = SeparatorSearch(separator)
        self._empty = separator[:0]
        self._is_text = isinstance(separator, str)

        # _buffer[_start:_cursor] is scanned but not handed out yet
        self._buffer = self._empty
        self._start = 0
        self._cursor = 0
        self._source_exhausted = False
        self._exhausted = False
        self._separator_seen = False
        self._failure: "t.Optional[BaseException]" = None

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self):
        return self

    def __next__(self):
        segment = self.next_segment()
        if segment is None:
            raise StopIteration
        return segment

    def next_segment(self) -> "t.Optional[t.Union[bytes, str]]":
        """Returns the next segment or None once the stream is over."""
        parts: list = []
        if self._advance(parts.append) is None:
            return None
        return self._empty.join(parts)

    def next_to_sink(self, sink) -> "t.Optional[int]":
        """Writes the next segment into the sink piece by piece.

        Every piece is written as soon as it is known not to be a part of a
        separator. Returns the number of bytes written or None once the
        stream is over.
        """
        return self._advance(sink.write)

    def iter_with_kind(self):
        """Yields (SegmentKind, segment) tuples."""
        for segment in self:
            yield self.last_kind, segment

    def _advance(self, write) -> "t.Optional[int]":
        if self._failure is not None:
            raise SourceReadError(
                "splitter is unusable after a failed read", self._failure
            ) from self._failure
        if self._exhausted:
            return None

        search = self._search
        written = 0
        while True:
            buffer = self._buffer
            index = search.feed(buffer, self._cursor)
            if index != -1:
                written += self._write(write, buffer, self._start, index)
                self._start = self._cursor = index + len(self.separator)
                self.last_kind = (
                    SegmentKind.MATCH
                    if self._separator_seen
                    else SegmentKind.PREFIX
                )
                self._separator_seen = True
                return written

            self._cursor = len(buffer)
            if self._source_exhausted:
                # an unfinished match at the end of data is just data
                written += self._write(write, buffer, self._start, len(buffer))
                self._finish()
                return written

            safe_end = search.safe_end(buffer)
            written += self._write(write, buffer, self._start, safe_end)
            self._start = safe_end
            self._fill()

    @staticmethod
    def _write(write, buffer, start, end) -> int:
        if end <= start:
            return 0
        write(buffer[start:end])
        return end - start

    def _fill(self):
        try:
            chunk = self.source.read(self.chunk_size)
        except Exception as e:
            self._failure = e
            logger.warning("failed to read from %r: %r", self.source, e)
            raise SourceReadError("failed to read from source", e) from e

        # an empty chunk of any kind is the end of data
        if not chunk and isinstance(
            chunk, (str, bytes, bytearray, memoryview)
        ):
            logger.debug("end of data reached on %r", self.source)
            self._source_exhausted = True
            return

        if self._is_text:
            is_valid = isinstance(chunk, str)
        else:
            is_valid = isinstance(chunk, (bytes, bytearray, memoryview))
        if not is_valid:
            self._failure = TypeError(
                f"source returned {type(chunk).__name__}, expected "
                f"{type(self.separator).__name__}"
            )
            logger.warning("unexpected chunk from %r", self.source)
            raise SourceReadError(
                "source returned a chunk of wrong type", self._failure
            ) from self._failure

        if not self._is_text and not isinstance(chunk, bytes):
            chunk = bytes(chunk)

        # drop what was handed out already, keep the tentative match
        start = self._start
        self._buffer = self._buffer[start:] + chunk
        self._cursor -= start
        self._start = 0

    def _finish(self):
        self._exhausted = True
        self._buffer = self._empty
        self._start = self._cursor = 0
        self._search.reset()
        self.last_kind = SegmentKind.SUFFIX
