import io
from unittest.mock import MagicMock

import pytest

from streamsplit import InvalidArgument
from streamsplit.fs import split_buffer, split_buffer_n_decode, split_file


def test_split_buffer():
    buffer = io.StringIO("a,b;;;1,2;;;3,4")
    assert list(split_buffer(buffer, delimiter=";;;", chunk_size=32768)) == [
        "a,b",
        "1,2",
        "3,4",
    ]
    assert buffer.closed

    for chunk_size in (1, 2, 3, 4):
        assert list(
            split_buffer(io.BytesIO(b"a\r\nb\r\n\r\nc"), b"\r\n", chunk_size)
        ) == [b"a", b"b", b"", b"c"]

    assert list(split_buffer(io.StringIO(""), ";")) == [""]
    assert list(split_buffer(io.BytesIO(b""), b";")) == [b""]


def test_split_buffer_closes_buffer():
    buffer = MagicMock()
    buffer.__enter__.return_value = buffer
    buffer.read.side_effect = [b"a;b", b""]
    assert list(split_buffer(buffer, b";")) == [b"a", b"b"]
    buffer.__exit__.assert_called_once()

    with pytest.raises(InvalidArgument):
        list(split_buffer(io.BytesIO(b"abc"), b""))


def test_split_buffer_n_decode():
    data = "привет||мир||".encode("utf-8")
    for chunk_size in (1, 5, 100):
        assert list(
            split_buffer_n_decode(io.BytesIO(data), b"||", chunk_size)
        ) == ["привет", "мир", ""]
    assert list(
        split_buffer_n_decode(
            io.BytesIO("a;b".encode("utf-16-le")),
            ";".encode("utf-16-le"),
            encoding="utf-16-le",
        )
    ) == ["a", "b"]


def test_split_file(tmp_path):
    path = tmp_path / "records.bin"
    path.write_bytes(b"\x00\x00".join([b"first", b"", b"third"]))
    assert list(split_file(path, b"\x00\x00")) == [b"first", b"", b"third"]
    assert list(split_file(str(path), [0, 0], chunk_size=2)) == [
        b"first",
        b"",
        b"third",
    ]
