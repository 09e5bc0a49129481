import math

import pytest

from advent2020.day20 import corner_product, main, parse_tiles, tile_edges


def _grid_tiles(n):
    """Tiles cut from one grid of unique characters, neighbours sharing borders."""
    size = 9 * n + 1
    grid = [[chr(0x100 + r * size + c) for c in range(size)] for r in range(size)]
    tiles = {}
    positions = {}
    for i in range(n):
        for j in range(n):
            tile_id = 100 + i * n + j
            rows = ["".join(grid[r][9 * j:9 * j + 10]) for r in range(9 * i, 9 * i + 10)]
            tiles[tile_id] = "".join(rows)
            positions[(i, j)] = tile_id
    return tiles, positions


def _rows():
    return ["".join(chr(0x41 + (r * 10 + c) % 50) for c in range(10)) for r in range(10)]


def test_tile_edges_relationships():
    rows = _rows()
    edges = tile_edges("".join(rows))
    assert len(edges) == 8
    assert edges[0] == rows[0]
    assert edges[2] == rows[-1]
    assert edges[4] == "".join(row[0] for row in rows)
    assert edges[6] == "".join(row[-1] for row in rows)
    for forward, backward in zip(edges[::2], edges[1::2]):
        assert backward == forward[::-1]


def test_tile_edges_rejects_non_square():
    with pytest.raises(ValueError):
        tile_edges("#" * 99)


def test_parse_tiles_reads_each_tile():
    rows = _rows()
    lines = ["Tile 7:", *rows, "", "Tile 9:", *reversed(rows), ""]
    tiles = parse_tiles(lines)
    assert tiles == {7: "".join(rows), 9: "".join(reversed(rows))}


def test_parse_tiles_without_trailing_blank():
    rows = _rows()
    assert parse_tiles(["Tile 3:", *rows]) == {3: "".join(rows)}


def test_single_tile_has_no_corners():
    assert corner_product({5: "".join(_rows())}) == 0


def test_two_by_two_all_corners():
    tiles, _ = _grid_tiles(2)
    assert corner_product(tiles) == math.prod(tiles)


def test_three_by_three_corners():
    tiles, positions = _grid_tiles(3)
    corners = [positions[(0, 0)], positions[(0, 2)], positions[(2, 0)], positions[(2, 2)]]
    assert corner_product(tiles) == math.prod(corners)


def test_corner_product_ignores_tile_order():
    tiles, _ = _grid_tiles(3)
    reordered = dict(reversed(list(tiles.items())))
    assert corner_product(reordered) == corner_product(tiles)


def test_main_prints_result(tmp_path, capsys):
    tiles, _ = _grid_tiles(2)
    lines = []
    for tile_id, picture in tiles.items():
        lines.append(f"Tile {tile_id}:")
        lines.extend(picture[r * 10:(r + 1) * 10] for r in range(10))
        lines.append("")
    path = tmp_path / "input.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    main(["-file", str(path)])
    assert capsys.readouterr().out.strip() == f"Part a answer: {math.prod(tiles)}"