from huffpack.cli import main
from huffpack.compressor import compress


def test_full_cycle(tmp_path, capsys):
    original = tmp_path / "entrada.txt"
    compressed = tmp_path / "out.huff"
    output = tmp_path / "out.txt"
    data = b"some text to squeeze, some text to squeeze"
    original.write_bytes(data)

    code = main([str(original), "--compressed", str(compressed), "--output", str(output)])

    assert code == 0
    assert compressed.read_bytes() == compress(data)
    assert output.read_bytes()[: len(data)] == data
    assert "successfully" in capsys.readouterr().out


def test_missing_input_fails(tmp_path, capsys):
    code = main(
        [
            str(tmp_path / "missing.txt"),
            "--compressed",
            str(tmp_path / "out.huff"),
            "--output",
            str(tmp_path / "out.txt"),
        ]
    )
    assert code == 1
    assert "Error compressing" in capsys.readouterr().out
    assert not (tmp_path / "out.huff").exists()


def test_empty_input_fails(tmp_path, capsys):
    original = tmp_path / "empty.txt"
    original.write_bytes(b"")
    code = main(
        [
            str(original),
            "--compressed",
            str(tmp_path / "out.huff"),
            "--output",
            str(tmp_path / "out.txt"),
        ]
    )
    assert code == 1
    assert "Error compressing" in capsys.readouterr().out