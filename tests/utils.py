from streamsplit import IterableSource


WORKED_EXAMPLE = bytes(
    [
        0xAA, 0xAB,
        0x00, 0x00, 0x01, 0x02, 0x03,
        0x00, 0x00, 0x04, 0x05, 0x06,
        0x00, 0x00, 0x07, 0x08,
    ]
)  # fmt: skip


def chunked(data, size):
    """Source which returns data in pieces of the given size, regardless of
    the size requested."""
    return IterableSource(
        data[i : i + size] for i in range(0, len(data), size)
    )


def split_points(data, points):
    """Source which breaks data at the given offsets."""
    bounds = [0, *points, len(data)]
    return IterableSource(
        data[start:end] for start, end in zip(bounds, bounds[1:])
    )


class FailingSource:
    """Returns given chunks and then raises the exception."""

    def __init__(self, chunks, exc):
        self.chunks = list(chunks)
        self.exc = exc
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        if self.chunks:
            return self.chunks.pop(0)
        raise self.exc


class ListSink:
    def __init__(self):
        self.writes = []

    def write(self, chunk):
        self.writes.append(chunk)
        return len(chunk)

    def getvalue(self):
        return b"".join(self.writes)
