import logging
from pathlib import Path

import pytest

from domain.antennas.errors import (
    AllocationError,
    MapFormatError,
    SourceUnavailableError,
)
from domain.antennas.registry import AntennaRegistry
from domain.antennas.value_objects import MapGrid

# Use infrastructure.* (not src.infrastructure.*) for consistency with domain.* imports.
from infrastructure.antennas.text_map_adapter import TextMapAdapter


def test_file_not_found_raises(tmp_path):
    adapter = TextMapAdapter()
    with pytest.raises(SourceUnavailableError) as excinfo:
        adapter.load_grid(tmp_path / "missing.txt")
    assert excinfo.value.name == "missing.txt"


def test_directory_is_not_a_map(tmp_path):
    adapter = TextMapAdapter()
    with pytest.raises(SourceUnavailableError):
        adapter.load_grid(tmp_path)


def test_permission_error_becomes_source_unavailable(tmp_path, monkeypatch, caplog):
    p = tmp_path / "locked.txt"
    p.write_text("A.\n")

    def _raise_permission_error(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "open", _raise_permission_error)

    adapter = TextMapAdapter()
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SourceUnavailableError) as excinfo:
            adapter.load_grid(p)

    assert isinstance(excinfo.value.__cause__, PermissionError)
    # Only the file name is logged, never the directory
    assert "locked.txt" in caplog.text
    assert str(tmp_path) not in caplog.text


def test_happy_path(map_file, caplog):
    p = map_file(["..A", "...", "B.."])

    adapter = TextMapAdapter()
    with caplog.at_level(logging.DEBUG):
        grid = adapter.load_grid(p)

    assert grid.shape == (3, 3)
    assert grid.lines() == ("..A", "...", "B..")
    assert "Loaded 3x3 grid" in caplog.text


def test_accepts_str_path(map_file):
    p = map_file(["A."])
    grid = TextMapAdapter().load_grid(str(p))
    assert grid.lines() == ("A.",)


def test_ragged_rows_rejected(fixture_copy):
    p = fixture_copy("ragged_rows.txt")

    with pytest.raises(MapFormatError) as excinfo:
        TextMapAdapter().load_grid(p)

    assert excinfo.value.line_number == 2
    assert (excinfo.value.expected, excinfo.value.actual) == (4, 2)


def test_space_cell_loads_as_antenna(tmp_path):
    p = tmp_path / "space.txt"
    p.write_text("A.\n. \n")

    grid = TextMapAdapter().load_grid(p)
    registry = AntennaRegistry.from_grid(grid)

    assert grid.lines() == ("A.", ". ")
    assert [(a.frequency, a.x, a.y) for a in registry.iter_antennas()] == [
        ("A", 0, 0),
        (" ", 1, 1),
    ]


def test_blank_line_inside_map_rejected(tmp_path):
    p = tmp_path / "gap.txt"
    p.write_text("A..\n\n.B.\n")

    with pytest.raises(MapFormatError):
        TextMapAdapter().load_grid(p)


def test_trailing_blank_lines_ignored(fixture_copy):
    grid = TextMapAdapter().load_grid(fixture_copy("trailing_blank_lines.txt"))
    assert grid.lines() == (".A.", "...")


def test_missing_final_newline(tmp_path):
    p = tmp_path / "no_newline.txt"
    p.write_text("A.\n.B")

    grid = TextMapAdapter().load_grid(p)
    assert grid.lines() == ("A.", ".B")


def test_crlf_line_endings(fixture_copy):
    grid = TextMapAdapter().load_grid(fixture_copy("crlf_endings.txt"))
    assert grid.lines() == ("A..", ".B.")


def test_empty_file_gives_empty_grid(fixture_copy):
    grid = TextMapAdapter().load_grid(fixture_copy("empty.txt"))
    assert grid.shape == (0, 0)


def test_memory_budget_exceeded(map_file):
    p = map_file(["A" * 50] * 10)

    adapter = TextMapAdapter(max_bytes=100)
    with pytest.raises(AllocationError):
        adapter.load_grid(p)


def test_memory_error_becomes_allocation_error(map_file, monkeypatch):
    p = map_file(["A."])

    def _raise_memory_error(lines):
        raise MemoryError

    monkeypatch.setattr(MapGrid, "from_lines", _raise_memory_error)

    with pytest.raises(AllocationError):
        TextMapAdapter().load_grid(p)


def test_invalid_encoding_rejected(tmp_path):
    p = tmp_path / "latin1.txt"
    p.write_bytes("é.\n".encode("latin-1"))

    with pytest.raises(SourceUnavailableError):
        TextMapAdapter().load_grid(p)

    grid = TextMapAdapter(encoding="latin-1").load_grid(p)
    assert grid.lines() == ("é.",)


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------
def test_save_overwrites_in_full(tmp_path):
    p = tmp_path / "map.txt"
    p.write_text("OLD CONTENT THAT IS LONGER\nSECOND\nTHIRD\n")

    TextMapAdapter().save_grid(MapGrid.from_lines(["A.", ".B"]), p)

    assert p.read_bytes() == b"A.\n.B\n"


def test_save_unwritable_destination_keeps_content(tmp_path, monkeypatch):
    p = tmp_path / "map.txt"
    p.write_text("A.\n")

    def _raise_permission_error(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "open", _raise_permission_error)

    with pytest.raises(SourceUnavailableError):
        TextMapAdapter().save_grid(MapGrid.empty(1, 2), p)

    monkeypatch.undo()
    assert p.read_text() == "A.\n"


def test_save_into_missing_directory(tmp_path):
    with pytest.raises(SourceUnavailableError):
        TextMapAdapter().save_grid(MapGrid.empty(1, 1), tmp_path / "nope" / "map.txt")


def test_persist_rebuilds_grid_from_registry(tmp_path, corners_registry):
    p = tmp_path / "map.txt"

    TextMapAdapter().persist(corners_registry.remove(0, 2), p)

    assert p.read_text() == "...\n...\nB..\n"


@pytest.mark.parametrize(
    "rows",
    [
        ["..A", "...", "B.."],
        ["A"],
        ["....", "...."],
        ["0a1b", "c2d3", "4e5f"],
    ],
)
def test_persist_then_load_reproduces_grid(tmp_path, rows):
    adapter = TextMapAdapter()
    grid = MapGrid.from_lines(rows)
    p = tmp_path / "roundtrip.txt"

    adapter.persist(AntennaRegistry.from_grid(grid), p)

    assert adapter.load_grid(p).lines() == grid.lines()
