import pytest

from cubscene.cli import main


@pytest.fixture
def scene_file(tmp_path):
    texture = tmp_path / "wall.xpm"
    texture.write_text("texture\n")
    lines = [
        f"NO {texture}",
        f"SO {texture}",
        f"WE {texture}",
        f"EA {texture}",
        "F 220,100,0",
        "C 225,30,0",
        "",
        "1111",
        "1N01",
        "1111",
    ]
    path = tmp_path / "map.cub"
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_wrong_argument_count_does_nothing(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == ""


def test_valid_file(scene_file, capsys):
    assert main([str(scene_file)]) == 0
    assert capsys.readouterr().out == ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert capsys.readouterr().out == "Error: Unable to open the file.\n"


def test_parse_error_reported(tmp_path, capsys):
    path = tmp_path / "bad.cub"
    path.write_text("hello\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error parsing: identification incorrect.\n"


def test_wrong_extension_reported(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text("\n")
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out == "Error parsing: Invalid file. Extension must be '.cub'.\n"