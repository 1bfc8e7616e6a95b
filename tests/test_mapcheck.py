from cubscene.config import MapConfig, parse_lines
from cubscene.mapcheck import (
    count_players,
    find_player,
    flood_fill,
    map_valid,
    player_valid,
)

CLOSED = ["111111", "100001", "10N001", "111111"]
OPEN_TOP = ["110111", "100001", "10N001", "111111"]


def test_count_players():
    assert count_players(["1N1", "1S1", "1E1", "1W1"]) == 4
    assert count_players(CLOSED) == 1


def test_player_valid():
    assert player_valid(CLOSED)
    assert not player_valid(["111", "1N1", "1S1"])
    assert not player_valid(["111", "101", "111"])


def test_find_player():
    assert find_player(CLOSED) == (2, 2)
    assert find_player(["111", "101"]) is None


def test_flood_fill_closed_map():
    assert flood_fill(CLOSED, (2, 2)) is True


def test_flood_fill_gap_in_wall():
    assert flood_fill(OPEN_TOP, (2, 2)) is False


def test_flood_fill_space_inside():
    rows = ["11111", "1N0 1", "11111"]
    assert flood_fill(rows, (1, 1)) is False


def test_flood_fill_does_not_change_rows():
    rows = list(CLOSED)
    flood_fill(rows, (2, 2))
    assert rows == CLOSED


def test_map_valid_records_player():
    config = MapConfig(map_rows=list(CLOSED))
    assert map_valid(config) is True
    assert config.player_position == find_player(CLOSED)


def test_map_valid_open_map():
    assert map_valid(MapConfig(map_rows=list(OPEN_TOP))) is False


def test_map_valid_without_player():
    config = MapConfig(map_rows=["111", "101", "111"])
    assert map_valid(config) is False
    assert config.player_position is None


def test_map_valid_empty_map():
    assert map_valid(MapConfig()) is False


def test_map_valid_from_parsed_file():
    lines = [
        "NO n.xpm\n",
        "SO s.xpm\n",
        "WE w.xpm\n",
        "EA e.xpm\n",
        "F 1,2,3\n",
        "C 4,5,6\n",
        "\n",
        " 1111\n",
        "11N01\n",
        "10001\n",
        "11111\n",
    ]
    config = parse_lines(lines)
    assert map_valid(config) is True
    assert config.player_position == (1, 2)