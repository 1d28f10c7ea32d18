from blocks_piece import CATALOG, HEXTRIS, TETRIS, TRITRIS, Mode, PieceShape, Rotation, catalog_size, piece_for


def all_shapes():
    for shapes in CATALOG.values():
        yield from shapes


def test_catalog_sizes():
    assert catalog_size(Mode.TRITRIS) == 8
    assert catalog_size(Mode.TETRIS) == 7
    assert catalog_size(Mode.HEXTRIS) == 29


def test_style_ids_follow_catalog_order():
    for shapes in CATALOG.values():
        assert [s.style for s in shapes] == list(range(1, len(shapes) + 1))


def test_cell_counts_per_mode():
    assert all(len(s.cells) == 3 for s in TRITRIS)
    assert all(len(s.cells) == 4 for s in TETRIS)
    assert all(1 <= len(s.cells) <= 6 for s in HEXTRIS)


def test_four_clockwise_turns_restore_every_shape():
    for shape in all_shapes():
        turned = shape
        for _ in range(4):
            turned = turned.rotated(Rotation.CW)
        assert turned == shape, shape.name


def test_rotation_inverses():
    for shape in all_shapes():
        assert shape.rotated(Rotation.CW).rotated(Rotation.CCW) == shape
        assert shape.rotated(Rotation.HALF).rotated(Rotation.HALF) == shape
        assert shape.rotated(Rotation.HALF) == shape.rotated(Rotation.CW).rotated(Rotation.CW)


def test_rotation_formulas():
    shape = PieceShape(((1, 2),), 3, "probe")
    assert shape.rotated(Rotation.CW).cells == ((-2, 1),)
    assert shape.rotated(Rotation.CCW).cells == ((2, -1),)
    assert shape.rotated(Rotation.HALF).cells == ((-1, -2),)


def test_rotation_returns_new_shape_with_same_style():
    t = TETRIS[6]
    r = t.rotated(Rotation.CW)
    assert r is not t
    assert r.style == t.style and r.name == t.name
    assert t.cells == ((0, 1), (-1, 0), (0, 0), (1, 0))


def test_at_adds_anchor():
    assert TETRIS[0].at(3, 4) == [(3, 4), (4, 4), (3, 5), (4, 5)]


def test_piece_for_falls_back_to_first_entry():
    assert piece_for(Mode.TETRIS, 2) is TETRIS[2]
    assert piece_for(Mode.TETRIS, 7) is TETRIS[0]
    assert piece_for(Mode.TRITRIS, -1) is TRITRIS[0]
