import pytest

pytest.importorskip("PySide6.QtWidgets")

from uprl.ui_widgets import dropped_directories  # noqa: E402


def test_only_directories_are_kept(tmp_path):
    folder = tmp_path / "links"
    folder.mkdir()
    f = tmp_path / "a.url"
    f.write_text("URL=http://a.example")

    assert dropped_directories([str(f), str(folder), str(tmp_path / "missing"), ""]) == [str(folder)]
