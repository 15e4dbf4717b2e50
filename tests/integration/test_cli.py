import logging

from identicon.__main__ import main
from identicon.modules.identicon.identicon_service import generate


def test_cli_saves_each_input(tmp_path, capsys) -> None:
    assert main(["banana", "asdf", "-o", str(tmp_path)]) == 0
    assert (tmp_path / "banana.png").read_bytes() == generate("banana")
    assert (tmp_path / "asdf.png").is_file()
    out = capsys.readouterr().out.splitlines()
    assert str(tmp_path / "banana.png") in out
    assert str(tmp_path / "asdf.png") in out


def test_cli_default_directory(output_dir) -> None:
    assert main(["banana"]) == 0
    assert (output_dir / "banana.png").is_file()


def test_cli_reports_sink_failure(tmp_path) -> None:
    blocker = tmp_path / "file"
    blocker.write_bytes(b"")
    assert main(["banana", "-o", str(blocker)]) == 1


def test_cli_logs_failing_input(tmp_path, caplog) -> None:
    blocker = tmp_path / "file"
    blocker.write_bytes(b"")
    with caplog.at_level(logging.INFO, logger="identicon"):
        assert main(["bad input", "-o", str(blocker)]) == 1
    assert any("'bad input'" in r.getMessage() for r in caplog.records)


def test_cli_accepts_empty_input(tmp_path) -> None:
    assert main(["", "-o", str(tmp_path)]) == 0
    assert (tmp_path / "%empty.png").read_bytes() == generate("")
