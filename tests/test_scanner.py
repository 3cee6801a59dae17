import pytest

from preselect.scanner import DataSource, Entry, Scanner


class ListSource(DataSource):
    def __init__(self, entries, error=None):
        self._entries = list(entries)
        self._error = error
        self.reads = 0

    def __next__(self):
        self.reads += 1
        if self._entries:
            return self._entries.pop(0)
        if self._error is not None:
            raise self._error
        raise StopIteration


def test_entry_path_is_tuple():
    entry = Entry("v", ["1", "2"])
    assert entry.path == ("1", "2")
    assert entry == Entry("v", ("1", "2"))


def test_data_source_iterates_itself():
    entries = [Entry("a", ("1",)), Entry("b", ("2",))]
    source = ListSource(entries)
    assert iter(source) is source
    assert list(source) == entries


def test_data_source_requires_next():
    with pytest.raises(TypeError):
        DataSource()


def test_scan_to_pushes_values_in_order():
    source = ListSource([Entry("a"), Entry("b"), Entry("c")])
    collected = []
    Scanner(source).scan_to(collected.append)
    assert collected == ["a", "b", "c"]


def test_scan_to_empty_source_pushes_nothing():
    collected = []
    Scanner(ListSource([])).scan_to(collected.append)
    assert collected == []


def test_scan_to_propagates_source_error():
    source = ListSource([Entry("a")], error=OSError("broken"))
    collected = []
    with pytest.raises(OSError, match="broken"):
        Scanner(source).scan_to(collected.append)
    assert collected == ["a"]


def test_scan_consumes_whole_source():
    source = ListSource([Entry("a"), Entry("b")])
    assert Scanner(source).scan(["a"]) is None
    assert source.reads == 3
    assert list(source) == []


def test_scan_propagates_source_error():
    source = ListSource([], error=ValueError("bad data"))
    with pytest.raises(ValueError, match="bad data"):
        Scanner(source).scan([])