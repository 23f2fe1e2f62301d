import pytest

from huffbook.cli import main


def test_message_roundtrip(tmp_path, capsys):
    container = tmp_path / "out.bin"
    assert main(["-m", "AAAABCCCDDE", "-o", str(container)]) == 0
    out = capsys.readouterr().out
    assert ">>> AAAABCCCDDE" in out
    assert container.read_bytes().startswith(b"HUFFBOOK")


def test_input_file_saved(tmp_path):
    source = tmp_path / "message.txt"
    source.write_bytes(b"hello huffman\n")
    decoded = tmp_path / "decoded.txt"
    code = main([
        "-i", str(source),
        "-o", str(tmp_path / "out.bin"),
        "-s", "--decoded", str(decoded),
    ])
    assert code == 0
    assert decoded.read_bytes() == b"hello huffman\n"


def test_missing_source_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code != 0


def test_both_sources_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["-m", "abc", "-i", "file.txt"])
    assert exc_info.value.code != 0


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0
    assert "--message" in capsys.readouterr().out


def test_unreadable_input(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "missing.txt"), "-o", str(tmp_path / "out.bin")]) == 1
    assert "[Error]" in capsys.readouterr().err


def test_verbose(tmp_path, capsys):
    assert main(["-m", "abc", "-o", str(tmp_path / "out.bin"), "-v"]) == 0
    assert "CodeTable(" in capsys.readouterr().out
