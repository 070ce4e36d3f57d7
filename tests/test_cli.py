from uprl.cli import main


def test_cli_processes_directory(tmp_path, make_shortcut, fake_fetcher, capsys):
    make_shortcut(tmp_path / "D", "a.url", "https://a.example")
    log = tmp_path / "errors.txt"

    rc = main([str(tmp_path / "D"), "--error-log", str(log)],
              title_fetcher=fake_fetcher({"https://a.example": "Page A"}))

    assert rc == 0
    assert (tmp_path / "D" / "Page A.url").exists()
    assert not log.exists()
    out = capsys.readouterr().out
    assert "1/1 processed" in out


def test_cli_flags(tmp_path, make_shortcut, fake_fetcher):
    d = tmp_path / "D"
    make_shortcut(d, "a.url", "https://a.example")
    make_shortcut(d / "sub", "b.url", "https://b.example")
    fetcher = fake_fetcher({"https://a.example": "A", "https://b.example": "B"})

    rc = main([str(d), "--no-recurse", "--backup", "--error-log", str(tmp_path / "e.txt")], title_fetcher=fetcher)

    assert rc == 0
    assert fetcher.calls == ["https://a.example"]
    assert (d / "UpRL-backup" / "a.url").exists()
    assert (d / "sub" / "b.url").exists()


def test_cli_failure_exit_code(tmp_path, make_shortcut, fake_fetcher, capsys):
    make_shortcut(tmp_path / "D", "a.url", "https://a.example")
    log = tmp_path / "errors.txt"

    rc = main([str(tmp_path / "D"), "--error-log", str(log)], title_fetcher=fake_fetcher({}))

    assert rc == 1
    assert log.exists()
    assert "FAILED" in capsys.readouterr().out


def test_cli_no_valid_directories(tmp_path, capsys):
    rc = main([str(tmp_path / "missing")])
    assert rc == 2
    assert "not a directory" in capsys.readouterr().err
