import threading

import pytest

from preselect.app import App, AppConfig
from preselect.loaders import Loader
from preselect.processor import Processor


class Recorder(Processor):
    def __init__(self):
        self.seen = []
        self._lock = threading.Lock()

    def process(self, entry):
        with self._lock:
            self.seen.append(entry)
        return False


def _files(tmp_path):
    (tmp_path / "words.txt").write_text("hello world")
    (tmp_path / "table.csv").write_text("a,b\n1,\"x,y\"\n")
    (tmp_path / "notes.md").write_text("not scanned")


def test_default_sources(tmp_path):
    _files(tmp_path)
    rec = Recorder()
    App(AppConfig(root=tmp_path, processor=rec)).run()
    assert sorted(rec.seen) == sorted(["hello", "world", "a", "b", "1", "x,y"])


def test_custom_mapping_overrides_default(tmp_path):
    (tmp_path / "words.txt").write_text("a,b c")
    rec = Recorder()
    config = AppConfig(
        root=tmp_path,
        ext_map={"txt": lambda r: Loader(r, [","])},
        processor=rec,
    )
    App(config).run()
    assert sorted(rec.seen) == ["a", "b c"]


def test_config_mapping_not_modified(tmp_path):
    _files(tmp_path)
    mapping = {"md": Loader}
    rec = Recorder()
    App(AppConfig(root=tmp_path, ext_map=mapping, processor=rec)).run()
    assert list(mapping) == ["md"]
    assert "scanned" in rec.seen


def test_default_root_is_current_directory(tmp_path, monkeypatch):
    (tmp_path / "here.txt").write_text("local token")
    monkeypatch.chdir(tmp_path)
    rec = Recorder()
    App(AppConfig(processor=rec)).run()
    assert sorted(rec.seen) == ["local", "token"]


def test_missing_root_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        App(AppConfig(root=tmp_path / "absent")).run()