import json

from uprl.settings import default_settings, job_from_settings, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    s = load_settings(tmp_path / "uprl_settings.json")
    assert s == default_settings()
    assert s["recurseSubdirectories"] is True
    assert s["backupFiles"] is False
    assert s["alwaysOnTop"] is False


def test_saved_values_are_loaded(tmp_path):
    path = tmp_path / "uprl_settings.json"
    s = default_settings()
    s["backupFiles"] = True
    s["recurseSubdirectories"] = False
    save_settings(path, s)

    loaded = load_settings(path)
    assert loaded["backupFiles"] is True
    assert loaded["recurseSubdirectories"] is False


def test_partial_file_is_completed_with_defaults(tmp_path):
    path = tmp_path / "uprl_settings.json"
    path.write_text(json.dumps({"alwaysOnTop": True}), encoding="utf-8")

    loaded = load_settings(path)
    assert loaded["alwaysOnTop"] is True
    assert loaded["recurseSubdirectories"] is True


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "uprl_settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == default_settings()

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == default_settings()


def test_job_from_settings():
    job = job_from_settings({"recurseSubdirectories": False, "backupFiles": True})
    assert job.recurse is False
    assert job.backup is True
    assert job.directories == []
