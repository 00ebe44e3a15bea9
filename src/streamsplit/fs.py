"""
Python's native open() doesn't support custom newlines in the text mode and
doesn't support "newlines" (delimiters) in binary mode. The following methods
should close the gap.
"""
from .splitter import Splitter


def split_buffer(buffer, delimiter, chunk_size=32768):
    """Reads text or binary buffer and splits it by delimiter.

    The buffer is closed once it is exhausted.

    Args:
      buffer: buffer to be read
      delimiter: delimiter to use for splitting
      chunk_size: chunk size to read at every iteration
    """
    with buffer:
        yield from Splitter(buffer, delimiter, chunk_size)


def split_buffer_n_decode(
    buffer, delimiter, chunk_size=32768, encoding="utf-8"
):
    """Reads binary buffer, splits it by binary delimiter and yields decoded
    chunks.

    Args:
      buffer: buffer to be read
      delimiter: delimiter to use for splitting
      chunk_size: chunk size to read at every iteration
      encoding: encoding to use when decoding a chunk
    """
    for chunk in split_buffer(buffer, delimiter, chunk_size):
        yield chunk.decode(encoding)


def split_file(path, delimiter, chunk_size=None):
    """Opens a file in binary mode and yields its parts split by delimiter.

    Args:
      path: path of the file to be read
      delimiter: binary delimiter to use for splitting
      chunk_size: (optional) chunk size to read at every iteration,
        defaults to SplitterOptionsCtx option
    """
    with open(path, "rb") as f:
        yield from Splitter(f, delimiter, chunk_size)
