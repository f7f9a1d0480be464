import pytest

from voxelgame.events import (
    EventDecodeError,
    EventType,
    PeerConnected,
    PeerDisconnected,
    PlayerAdded,
    PlayerLeaving,
    decode_event,
    encode_event,
)


def test_event_type_numbers():
    assert decode_event(bytes([0])) is None
    assert encode_event(PlayerAdded(1, True))[0] == 1
    assert encode_event(PlayerLeaving(1))[0] == 2


@pytest.mark.parametrize(
    "event",
    [
        PlayerAdded(1, True),
        PlayerAdded(42, False),
        PlayerAdded(0xFFFFFFFF, True),
        PlayerLeaving(0),
        PlayerLeaving(7),
    ],
)
def test_round_trip(event):
    assert decode_event(encode_event(event)) == event


def test_player_added_wire_bytes():
    assert encode_event(PlayerAdded(5, True)) == b"\x01\x05\x00\x00\x00\x01\x00\x00\x00"


def test_player_leaving_wire_bytes():
    assert encode_event(PlayerLeaving(7)) == b"\x02\x07\x00\x00\x00"


def test_first_byte_is_type():
    assert encode_event(PlayerAdded(3, False))[0] == EventType.PLAYER_ADDED
    assert encode_event(PlayerLeaving(3))[0] == EventType.PLAYER_LEAVING


def test_trailing_bytes_are_ignored():
    data = encode_event(PlayerLeaving(9)) + b"\xaa\xbb\xcc\xdd"
    assert decode_event(data) == PlayerLeaving(9)


def test_connection_request_has_no_event():
    assert decode_event(bytes([EventType.CONNECTION_REQUEST])) is None


def test_empty_packet_rejected():
    with pytest.raises(EventDecodeError):
        decode_event(b"")


def test_unknown_type_rejected():
    with pytest.raises(EventDecodeError):
        decode_event(b"\x09\x00\x00\x00\x00")


def test_short_payload_rejected():
    with pytest.raises(EventDecodeError):
        decode_event(encode_event(PlayerAdded(1, True))[:4])


def test_local_events_are_not_encoded():
    with pytest.raises(TypeError):
        encode_event(PeerConnected(object()))
    with pytest.raises(TypeError):
        encode_event(PeerDisconnected(object()))


def test_player_id_out_of_range():
    with pytest.raises(ValueError):
        encode_event(PlayerLeaving(-1))
    with pytest.raises(ValueError):
        encode_event(PlayerAdded(0x100000000, False))


def test_messages():
    assert PlayerAdded(4, False).message() == "player with ID 4 has joined the game"
    assert PlayerAdded(4, True).message() == "player ID: 4"
    assert PlayerLeaving(4).message() == "player with ID 4 has left the game"