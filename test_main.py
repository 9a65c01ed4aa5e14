import pytest

import main
from main import UsageError, parse_args


@pytest.mark.parametrize(
    "args, expected",
    [
        (["data.csv"], ("data.csv", None)),
        (["-b", "csv", "data.txt"], ("data.txt", "csv")),
        (["data.txt", "-b", "tsv"], ("data.txt", "tsv")),
    ],
)
def test_parse_args(args, expected):
    assert parse_args(args) == expected


@pytest.mark.parametrize(
    "args, message",
    [
        (["a.csv", "b.csv"], "Multiple files specified"),
        (["a.csv", "-b"], "'-b' option requires format specification"),
        ([], "Usage:"),
    ],
)
def test_parse_args_usage_errors(args, message):
    with pytest.raises(UsageError) as exc:
        parse_args(args)
    assert message in str(exc.value)


def _no_session(*_):
    raise AssertionError("terminal session must not start")


def test_usage_error_exits_before_session(monkeypatch, capsys):
    monkeypatch.setattr(main.curses, "wrapper", _no_session)
    with pytest.raises(SystemExit) as exc:
        main.main(["a.csv", "b.csv"])
    assert exc.value.code != 0
    assert "Multiple files specified" in capsys.readouterr().err


def test_unsupported_format_exits_before_session(monkeypatch, capsys):
    monkeypatch.setattr(main.curses, "wrapper", _no_session)
    with pytest.raises(SystemExit) as exc:
        main.main(["notes.XYZ"])
    assert exc.value.code != 0
    assert "File format 'XYZ' is not supported" in capsys.readouterr().err


def test_version(capsys):
    main.main(["-v"])
    assert capsys.readouterr().out.strip() == main.__version__


def test_loaded_table_reaches_session(monkeypatch, tmp_path):
    path = tmp_path / "t.csv"
    path.write_text("a,b\n1,2\n")
    seen = {}

    def fake_wrapper(fn):
        seen["called"] = True

    monkeypatch.setattr(main.curses, "wrapper", fake_wrapper)
    monkeypatch.setattr(main, "configure_logging", lambda cfg: None)
    main.main([str(path)])
    assert seen == {"called": True}
