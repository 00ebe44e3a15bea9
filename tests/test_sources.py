import pytest

from streamsplit import IterableSource


def test_iterable_source_read():
    source = IterableSource([b"abc", b"", b"de"])
    assert source.read(2) == b"ab"
    assert source.read(5) == b"c"
    assert source.read() == b"de"
    assert source.read() == b""
    assert source.read(10) == b""


def test_iterable_source_empty():
    assert IterableSource([]).read() == b""
    assert IterableSource([b"", b""]).read(1) == b""
    assert IterableSource([], empty="").read() == ""
    assert IterableSource(["", ""]).read() == ""


def test_iterable_source_text():
    source = IterableSource(iter(["ab", "c"]))
    assert source.read(1) == "a"
    assert source.read(-1) == "b"
    assert source.read(1) == "c"
    assert source.read(1) == ""


def test_iterable_source_close():
    def gen_chunks():
        yield b"abc"

    chunks = gen_chunks()
    with IterableSource(chunks) as source:
        pass
    assert source.closed
    # the generator is closed too
    assert list(chunks) == []
    with pytest.raises(ValueError):
        source.read()

    source = IterableSource([b"abc"])
    source.read(1)
    source.close()
    with pytest.raises(ValueError):
        source.read()
