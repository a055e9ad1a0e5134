import pytest

from leetkit.cli import BANNER, main


def test_main_prints_banner(capsys):
    status = main([])
    out = capsys.readouterr().out
    assert status == 0
    assert out == BANNER + "\n"


def test_main_output_text(capsys):
    main([])
    assert capsys.readouterr().out == "LeetCode Project\n"


def test_unknown_argument_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "leetkit" in capsys.readouterr().out