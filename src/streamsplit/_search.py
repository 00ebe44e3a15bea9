"""Incremental search of a separator in a buffer which grows between calls."""
import typing as t


class SeparatorSearch:
    """Searches for a separator in a buffer which gets refilled between
    calls, remembering the tentative match at the buffer tail.

    The only state is ``partial``:

     * ``0`` - no partial match, every scanned byte is safe to hand out
     * ``k`` (``0 < k < len(separator)``) - the last ``k`` scanned bytes
       equal ``separator[:k]``, so they can be neither emitted nor
       discarded until more bytes confirm or refute the match

    >>> search = SeparatorSearch(b"\\x00\\x00")
    >>> search.feed(b"ab\\x00", 0)
    -1
    >>> search.partial
    1
    >>> search.feed(b"ab\\x00\\x00c", 3)
    2
    """

    __slots__ = ("separator", "partial")

    def __init__(self, separator: "t.Union[bytes, str]"):
        self.separator = separator
        self.partial = 0

    def reset(self):
        self.partial = 0

    def feed(self, buffer, start: int) -> int:
        """Continue the search in ``buffer``, whose bytes before ``start``
        were already scanned by the previous call.

        Returns the index of the first full separator occurrence (and resets
        the state) or -1, in which case bytes before ``safe_end(buffer)``
        cannot be part of any occurrence.
        """
        from_ = start - self.partial
        index = buffer.find(self.separator, from_)
        if index != -1:
            self.partial = 0
            return index
        self.partial = self.tail_overlap(buffer, from_)
        return -1

    def tail_overlap(self, buffer, lower_bound: int = 0) -> int:
        """Length of the longest proper separator prefix which ends the
        buffer and starts no earlier than ``lower_bound``."""
        separator = self.separator
        length = min(len(separator) - 1, len(buffer) - lower_bound)
        while length > 0:
            if buffer.endswith(separator[:length]):
                return length
            length -= 1
        return 0

    def safe_end(self, buffer) -> int:
        return len(buffer) - self.partial
