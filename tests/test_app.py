import io
import sys

import pytest

from cubscene.app import ANIMATION_FRAMES, Program, main
from cubscene.image import Color, Image

XPM_TEXT = """/* XPM */
static char *tex[] = {
"3 3 2 1",
"a c #FF0000",
"b c #0000FF",
"abb",
"bab",
"bba"
};
"""


def make_program():
    return Program(Image(4, 3))


def test_default_position():
    program = make_program()
    assert (program.x, program.y) == (100, 100)


@pytest.mark.parametrize("key", [2, 100])
def test_move_right_by_image_width(key):
    program = make_program()
    program.handle_key(key)
    assert program.x == 100 + program.image.width


@pytest.mark.parametrize("key", [0, 97])
def test_move_left_by_image_width(key):
    program = make_program()
    program.handle_key(key)
    assert program.x == 100 - program.image.width


@pytest.mark.parametrize("key", [1, 115])
def test_move_down_by_image_height(key):
    program = make_program()
    program.handle_key(key)
    assert program.y == 100 + program.image.height


@pytest.mark.parametrize("key", [13, 119])
def test_move_up_by_image_height(key):
    program = make_program()
    program.handle_key(key)
    assert program.y == 100 - program.image.height


def test_right_then_left_returns(capsys):
    program = make_program()
    program.handle_key(100)
    program.handle_key(97)
    assert program.x == 100
    assert "Key pressed -> 100" in capsys.readouterr().out


@pytest.mark.parametrize("key", [53, 65307])
def test_quit_key_stops(key, capsys):
    program = make_program()
    program.handle_key(key)
    assert program.running is False
    assert "Key pressed" not in capsys.readouterr().out


@pytest.mark.parametrize(
    "key, color",
    [
        (114, Color(255, 0, 0, 0)),
        (65471, Color(0, 255, 0, 0)),
        (98, Color(0, 0, 255, 0)),
    ],
)
def test_fill_keys_recolour_image(key, color):
    program = make_program()
    program.handle_key(key)
    pixel = color.to_bgra()
    assert bytes(program.image.data) == pixel * (4 * 3)


def test_unknown_key_changes_nothing():
    program = make_program()
    before = bytes(program.image.data)
    program.handle_key(42)
    assert (program.x, program.y) == (100, 100)
    assert bytes(program.image.data) == before
    assert program.running is True


def test_animation_moves_down_then_back():
    program = make_program()
    for _ in range(ANIMATION_FRAMES - 1):
        program.animate()
    assert program.y == 100
    program.animate()
    assert program.y == 101
    for _ in range(ANIMATION_FRAMES):
        program.animate()
    assert program.y == 100
    assert program.frame == 0


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Invalid number of arguments." in capsys.readouterr().out


def test_main_wrong_extension(tmp_path, capsys):
    assert main([str(tmp_path / "scene.txt")]) == 1
    assert "Insert .cub file" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert "Map not found." in capsys.readouterr().out


def _write_scene(tmp_path, rows):
    tex = tmp_path / "tex.xpm"
    tex.write_text(XPM_TEXT)
    lines = [
        f"NO {tex}",
        f"SO {tex}",
        f"WE {tex}",
        f"EA {tex}",
        "F 10,20,30",
        "C 40,50,60",
        "",
        *rows,
    ]
    scene = tmp_path / "scene.cub"
    scene.write_text("\n".join(lines) + "\n")
    return scene, tex


def test_main_valid_scene(tmp_path, monkeypatch, capsys):
    scene, tex = _write_scene(tmp_path, ["111", "1N1", "111"])
    (tmp_path / "xpm").mkdir()
    (tmp_path / "xpm" / "player.xpm").write_text(XPM_TEXT)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("100\n65307\n119\n"))
    assert main([str(scene)]) == 0
    out = capsys.readouterr().out
    assert f"North texture: {tex}" in out
    assert "Map array: 1N1" in out
    assert f"pixel color: {0xFF0000}" in out
    assert "Key pressed -> 100" in out
    assert "Key pressed -> 119" not in out


def test_main_open_map(tmp_path, capsys):
    scene, _ = _write_scene(tmp_path, ["1N1", "111"])
    assert main([str(scene)]) == 1
    assert "Map is not valid." in capsys.readouterr().out


def test_main_two_players(tmp_path, capsys):
    scene, _ = _write_scene(tmp_path, ["1111", "1NS1", "1111"])
    assert main([str(scene)]) == 1
    assert "Map is not valid." in capsys.readouterr().out


def test_main_missing_sprite(tmp_path, monkeypatch, capsys):
    scene, _ = _write_scene(tmp_path, ["111", "1N1", "111"])
    monkeypatch.chdir(tmp_path)
    assert main([str(scene)]) == 1
    assert "Error" in capsys.readouterr().out