from voxelgame.world import World


def test_world_starts_with_origin_chunk():
    world = World()
    assert world.chunk_manager.is_chunk_generated((0, 0, 0))
    assert len(world.chunk_manager) == 1


def test_world_announces_test_block(capsys):
    World()
    assert capsys.readouterr().out == "dirt\n"


def test_worlds_do_not_share_chunks():
    first = World()
    second = World()
    first.chunk_manager.get_chunk((1, 1, 1))
    assert not second.chunk_manager.is_chunk_generated((1, 1, 1))
    assert first.chunk_manager.get_chunk((0, 0, 0)) is not second.chunk_manager.get_chunk((0, 0, 0))