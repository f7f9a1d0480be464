import pytest

from voxelgame.chunk import CHUNK_SIZE, CHUNK_VOLUME, Chunk, block_index, block_position


def test_chunk_volume_is_cube_of_size():
    assert block_index((CHUNK_SIZE - 1,) * 3) + 1 == CHUNK_SIZE**3
    with pytest.raises(IndexError):
        block_position(CHUNK_SIZE**3)


def test_origin_has_index_zero():
    assert block_index((0, 0, 0)) == 0
    assert block_position(0) == (0, 0, 0)


def test_last_corner_has_last_index():
    corner = (CHUNK_SIZE - 1,) * 3
    assert block_index(corner) == CHUNK_VOLUME - 1
    assert block_position(CHUNK_VOLUME - 1) == corner


def test_x_varies_fastest():
    assert block_index((1, 0, 0)) == 1
    assert block_index((0, 1, 0)) == CHUNK_SIZE
    assert block_index((0, 0, 1)) == CHUNK_SIZE * CHUNK_SIZE


@pytest.mark.parametrize("index", [0, 1, 31, 32, 1023, 1024, 3137, CHUNK_VOLUME - 1])
def test_index_round_trip(index):
    assert block_index(block_position(index)) == index


@pytest.mark.parametrize("position", [(0, 0, 0), (1, 2, 3), (31, 0, 17), (5, 31, 31)])
def test_position_round_trip(position):
    assert block_position(block_index(position)) == position


@pytest.mark.parametrize("position", [(-1, 0, 0), (0, CHUNK_SIZE, 0), (0, 0, 99)])
def test_position_outside_chunk_is_rejected(position):
    with pytest.raises(IndexError):
        block_index(position)


@pytest.mark.parametrize("index", [-1, CHUNK_VOLUME])
def test_index_outside_chunk_is_rejected(index):
    with pytest.raises(IndexError):
        block_position(index)


def test_chunk_keeps_position_as_tuple():
    assert Chunk([4, -2, 7]).position == (4, -2, 7)


def test_blocks_alternate_air_and_dirt():
    chunk = Chunk((0, 0, 0))
    assert chunk.get_block((0, 0, 0)).name == "air"
    assert chunk.get_block((1, 0, 0)).name == "dirt"
    assert chunk.get_block((1, 2, 3)).name == "dirt"


def test_block_id_follows_index_parity():
    chunk = Chunk((0, 0, 0))
    for position in [(0, 0, 0), (3, 4, 5), (30, 1, 2), (31, 31, 31)]:
        assert chunk.get_block(position).block_id == block_index(position) % 2


def test_get_block_outside_chunk_raises():
    with pytest.raises(IndexError):
        Chunk((0, 0, 0)).get_block((CHUNK_SIZE, 0, 0))


def test_print_position(capsys):
    Chunk((1, 2, 3)).print_position()
    assert capsys.readouterr().out == "ivec3(1, 2, 3)\n"