from geostatics.logger import LogLevel, log, read_full_log


def test_default_level_is_info_coloured(tmp_path, capsys):
    path = tmp_path / "app.log"
    line = log("hello", log_path=path)
    assert line == "\033[34m   hello\033[0m"
    assert read_full_log(path) == line + "\n"
    assert capsys.readouterr().out == line + "\n"


def test_default_level_has_no_escape_codes(tmp_path, capsys):
    path = tmp_path / "app.log"
    log("plain", LogLevel.DEFAULT, path)
    assert read_full_log(path) == "   plain\n"
    assert capsys.readouterr().out == "   plain\n"


def test_warning_and_error_colours(tmp_path):
    path = tmp_path / "app.log"
    warning = log("w", LogLevel.WARNING, path)
    error = log("e", LogLevel.ERROR, path)
    assert warning.startswith("\033[33m")
    assert error.startswith("\033[31m")
    assert read_full_log(path) == warning + "\n" + error + "\n"


def test_log_appends_to_existing_file(tmp_path):
    path = tmp_path / "app.log"
    path.write_text("existing\n", encoding="utf-8")
    log("next", LogLevel.DEFAULT, path)
    assert read_full_log(path) == "existing\n   next\n"


def test_unwritable_path_reports_on_stderr(tmp_path, capsys):
    line = log("lost", LogLevel.DEFAULT, tmp_path)
    captured = capsys.readouterr()
    assert "Logger not initialized or file cannot be opened." in captured.err
    assert captured.out == line + "\n"


def test_read_missing_log(tmp_path):
    assert read_full_log(tmp_path / "missing.log") == "Logger file could not be opened."