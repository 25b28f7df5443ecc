import pytest

from termage.shape import Shape


@pytest.fixture
def bird():
    return Shape("bird", ["<o>", " v", "/ \\"])


def test_dimensions(bird):
    assert bird.height == len(bird.rows)
    assert bird.width == max(len(r) for r in bird.rows)


def test_rows_and_id_are_kept(bird):
    assert bird.sprite_id == "bird"
    assert bird.rows == ("<o>", " v", "/ \\")


def test_at_returns_characters(bird):
    assert bird.at(0, 1) == "o"
    assert bird.at(2, 2) == "\\"


def test_short_rows_are_padded(bird):
    assert bird.at(1, 2) == " "


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_at_outside_raises(bird, row, col):
    with pytest.raises(IndexError):
        bird.at(row, col)


def test_empty_shape():
    shape = Shape()
    assert (shape.width, shape.height) == (0, 0)
    with pytest.raises(IndexError):
        shape.at(0, 0)


def test_shapes_compare_by_value():
    assert Shape("a", ["xx"]) == Shape("a", ("xx",))
    assert Shape("a", ["xx"]) != Shape("b", ["xx"])