"""Adapters which turn other producers of bytes into readable sources."""
import typing as t


class IterableSource:
    """
    Exposes ``read(size)`` over an iterable of chunks (e.g. a generator of
    network packets or ``requests``' ``iter_content``)

    >>> source = IterableSource([b"ab", b"", b"cd"])
    >>> source.read(3)
    b'ab'
    >>> source.read(1)
    b'c'
    """

    def __init__(self, chunks: "t.Iterable", empty=b""):
        """Init self.

        Args:
          chunks: iterable of bytes (or str) chunks
          empty: what to return at the end of data if the iterable produced
            no chunks at all, pass "" for text chunks
        """
        self._chunks = iter(chunks)
        self._empty = empty
        self._pending = None
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()

    def read(self, size: int = -1):
        """Returns at most ``size`` items of the next non-empty chunk (the
        whole chunk if size is negative). An empty chunk means the iterable
        is over."""
        if self.closed:
            raise ValueError("I/O operation on closed source")

        chunk = self._pending
        self._pending = None
        while not chunk:
            try:
                chunk = next(self._chunks)
            except StopIteration:
                return self._empty
            self._empty = chunk[:0]
        if 0 <= size < len(chunk):
            self._pending = chunk[size:]
            chunk = chunk[:size]
        return chunk

    def close(self):
        self.closed = True
        self._pending = None
        close_chunks = getattr(self._chunks, "close", None)
        if close_chunks is not None:
            close_chunks()
