import io

import pytest

from minirt.lines import LineReader, count_lines, read_lines

SCENE = (
    "A 0.2 255,255,255\n"
    "C -50,0,20 0,0,1 70\n"
    "L -40,0,30 0.7 255,255,255\n"
    "sp 0,0,20 20 255,0,0"
)


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO("ab\ncd\n"))
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd\n"
    assert reader.read_line() is None


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("first\nlast"))
    assert list(reader) == ["first\n", "last"]


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).read_line() is None


def test_stays_exhausted():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\nx\n"))) == ["\n", "\n", "x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 50, 1000])
def test_round_trip_for_any_buffer_size(size):
    lines = list(LineReader(io.StringIO(SCENE), buffer_size=size))
    assert "".join(lines) == SCENE
    assert len(lines) == SCENE.count("\n") + 1
    assert all(line.count("\n") <= 1 for line in lines)


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=size)


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(SCENE, encoding="utf-8")
    lines = read_lines(path)
    assert "".join(lines) == SCENE
    assert lines[0] == "A 0.2 255,255,255\n"


def test_count_lines_matches_read_lines(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(SCENE + "\n", encoding="utf-8")
    assert count_lines(path) == len(read_lines(path))
    assert count_lines(path) == SCENE.count("\n") + 1


def test_empty_file(tmp_path):
    path = tmp_path / "empty.rt"
    path.write_text("", encoding="utf-8")
    assert read_lines(path) == []
    assert count_lines(path) == 0


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.rt")
    with pytest.raises(FileNotFoundError):
        count_lines(tmp_path / "absent.rt")