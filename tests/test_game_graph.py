import io

import pytest

from dungeonlab.game_graph import NUM_ROOMS, Direction, GameGraph, main

NONE = (-1, -1, -1, -1, -1, -1)

# links in file order: north, south, east, west, up, down
STANDARD = {
    0: (1, -1, 2, -1, -1, -1),
    1: (-1, 0, -1, -1, -1, -1),
    2: (-1, -1, -1, 0, -1, 3),
    3: (-1, -1, -1, -1, 2, -1),
}


def _room_lines(index, links):
    return [
        f"Room {index}",
        f"Description of room {index}",
        f"Item{index}",
        f"Creature{index}",
        *map(str, links),
    ]


def _layout_text(links_by_room, header=""):
    lines = []
    for index in range(NUM_ROOMS):
        lines += _room_lines(index, links_by_room.get(index, NONE))
    return header + "\n".join(lines) + "\n"


def _write(tmp_path, text):
    path = tmp_path / "layout.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.fixture
def game(tmp_path):
    g = GameGraph()
    g.load_game(_write(tmp_path, _layout_text(STANDARD)))
    return g


def test_load_returns_first_room_description(tmp_path):
    g = GameGraph()
    text = g.load_game(_write(tmp_path, _layout_text(STANDARD)))
    assert text == (
        "Room 0\n"
        "Description of room 0\n"
        "There is a Item0 in the room.\n"
        "There is a Creature0 in the room.\n"
        "There is a door on the North wall.\n"
        "There is a door on the East wall.\n"
        "\n"
    )
    assert g.location == 0


def test_rooms_hold_loaded_fields(game):
    room = game.rooms[2]
    assert room.name == "Room 2"
    assert room.item == "Item2"
    assert room.creature == "Creature2"
    assert room.doors == {Direction.WEST, Direction.DOWN}


def test_comments_and_blank_lines_are_skipped(tmp_path):
    plain = GameGraph()
    commented = GameGraph()
    first = plain.load_game(_write(tmp_path, _layout_text(STANDARD)))
    second = commented.load_game(
        _write(tmp_path, _layout_text(STANDARD, header="# layout\n\n# rooms\n\n"))
    )
    assert first == second
    assert plain.adjacency_text() == commented.adjacency_text()


def test_fresh_graph_matrix_is_empty():
    lines = GameGraph().adjacency_text().splitlines()
    assert lines[0] == "Adjancecy Matrix for the Rooms. "
    assert len(lines) == NUM_ROOMS + 1
    assert all(set(row.split()) == {"-"} for row in lines[1:])


def test_adjacency_marks_links(game):
    rows = [row.split() for row in game.adjacency_text().splitlines()[1:]]
    assert all(len(row) == NUM_ROOMS for row in rows)
    assert rows[0][1] == "N"
    assert rows[0][2] == "E"
    assert rows[2][3] == "D"
    assert rows[3][2] == "U"
    assert rows[0].count("-") == NUM_ROOMS - 2


def test_go_north_and_back(game):
    out = game.do_command("GO NORTH")
    assert out == "Going NORTH. New Room is:\n\n" + game.describe_room(1)
    assert game.location == 1
    out = game.do_command("GO SOUTH")
    assert out.startswith("Going SOUTH. New Room is:\n\n")
    assert game.location == 0


def test_stairs_and_west(game):
    game.do_command("GO EAST")
    assert game.location == 2
    assert game.do_command("GO DOWN").startswith("Going DOWN.")
    assert game.location == 3
    game.do_command("GO UP")
    assert game.location == 2
    game.do_command("GO WEST")
    assert game.location == 0


def test_blocked_direction(game):
    assert game.do_command("GO WEST") == (
        "You cannot move in that direction. Try another input.\n"
    )
    assert game.location == 0


def test_quit_finishes(game):
    assert not game.finished
    assert game.do_command("QUIT") == "Game is Closing\n"
    assert game.finished


@pytest.mark.parametrize("command", ["TAKE SWORD", "FIGHT GOBLIN", "TAKE"])
def test_take_and_fight_not_available(game, command):
    assert game.do_command(command) == (
        "This is not yet implemented. Please try another input.\n"
    )


@pytest.mark.parametrize("command", ["DANCE", "go north", "GO", ""])
def test_wrong_input(game, command):
    assert game.do_command(command) == "Wrong Input. Please try again.\n"
    assert game.location == 0


def test_later_direction_overwrites_shared_target(tmp_path):
    g = GameGraph()
    g.load_game(_write(tmp_path, _layout_text({0: (5, 5, -1, -1, -1, -1)})))
    assert g.rooms[0].doors == {Direction.NORTH, Direction.SOUTH}
    assert g.do_command("GO NORTH") == ""
    assert g.location == 0
    g.do_command("GO SOUTH")
    assert g.location == 5


def test_non_numeric_link_reads_as_room_zero(tmp_path):
    g = GameGraph()
    g.load_game(_write(tmp_path, _layout_text({0: ("xyz", -1, -1, -1, -1, -1)})))
    assert Direction.NORTH in g.rooms[0].doors
    assert g.do_command("GO NORTH").startswith("Going NORTH.")
    assert g.location == 0


def test_link_outside_dungeon_rejected(tmp_path):
    g = GameGraph()
    with pytest.raises(ValueError):
        g.load_game(_write(tmp_path, _layout_text({3: (NUM_ROOMS, -1, -1, -1, -1, -1)})))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GameGraph().load_game(str(tmp_path / "absent.txt"))


def test_short_file_leaves_empty_rooms(tmp_path):
    g = GameGraph()
    g.load_game(_write(tmp_path, "\n".join(_room_lines(0, STANDARD[0])) + "\n"))
    assert g.rooms[0].name == "Room 0"
    assert g.rooms[NUM_ROOMS - 1].name == ""
    assert g.rooms[NUM_ROOMS - 1].doors == set(Direction)


def test_overlong_line_ends_the_data(tmp_path):
    text = _layout_text(STANDARD).replace("Room 0", "R" * 128, 1)
    g = GameGraph()
    g.load_game(_write(tmp_path, text))
    assert g.rooms[0].name == ""
    assert g.rooms[1].name == ""


def test_describe_room_out_of_range(game):
    with pytest.raises(IndexError):
        game.describe_room(NUM_ROOMS)
    with pytest.raises(IndexError):
        game.describe_room(-1)


def test_main_plays_until_quit(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path, _layout_text(STANDARD))
    monkeypatch.setattr("sys.stdin", io.StringIO("go north\nquit\nGO SOUTH\n"))
    assert main([path]) == 0
    out = capsys.readouterr().out
    assert "go north\n" in out
    assert "Going NORTH. New Room is:" in out
    assert "Game is Closing" in out
    assert "Going SOUTH" not in out


def test_main_stops_at_end_of_input(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path, _layout_text(STANDARD))
    monkeypatch.setattr("sys.stdin", io.StringIO("dance\n"))
    assert main([path]) == 0
    assert "Wrong Input. Please try again." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Unable to open game file" in capsys.readouterr().out