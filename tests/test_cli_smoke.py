from pathlib import Path

import pytest

from apps.cli.run import main


def test_cli_prints_histogram(capsys):
    main(["--trials", "25", "--seed", "4", "--progress", "off"])
    out = capsys.readouterr().out
    assert "N=5" in out
    assert "average attempts:" in out
    assert "games=25" in out


def test_cli_persists_outputs(tmp_path: Path, capsys):
    main(["--trials", "10", "--seed", "4", "--progress", "off", "--persist", "--details",
          "--start-word", "crane", "--selection", "sweep", "--stride", "7",
          "--outdir", str(tmp_path)])
    names = sorted(p.name for p in tmp_path.iterdir())
    assert any(n.endswith("_manifest.json") for n in names)
    assert any(n.endswith("_games.csv") for n in names)
    assert len(names) == 3


def test_cli_rejects_bad_start_word():
    with pytest.raises(SystemExit):
        main(["--trials", "5", "--progress", "off", "--start-word", "toolong"])


@pytest.mark.parametrize("name,content", [
    ("words.json", b'{"words": ["crane"]}'),
    ("broken.json", b'["crane", '),
    ("words.txt", b"crane\n\xff\xfe\n"),
])
def test_cli_rejects_malformed_dictionary_file(tmp_path: Path, name, content):
    d = tmp_path / name
    d.write_bytes(content)
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(d), "--trials", "5", "--progress", "off"])
    assert str(exc.value).startswith("error:")
