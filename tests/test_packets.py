"""Tests for the packet dispatcher and every packet layout."""
import io

import pytest

from infonclient.core import ByteCursor, StreamClosed
from infonclient.parsing.packets import (
    Chat,
    CreatureDead,
    CreatureSpawned,
    CreatureUpdate,
    Frame,
    King,
    PacketDecoder,
    PacketType,
    PlayerUpdate,
    ProtocolVersion,
    QuitMsg,
    Transition,
    Unknown,
    Welcome,
)


def _decoder(data: bytes):
    stream = io.BytesIO(data)
    cursor = ByteCursor(stream)
    return PacketDecoder(cursor), cursor, stream


# Wire bytes for each creature update bit, and the attributes each one fills.
_CREATURE_BITS = {
    0: (bytes([0x00, 0x0A, 0x0B]), ["alive"]),          # spawned at 10,11
    1: (bytes([0x02]), ["ctype"]),
    2: (bytes([0x53]), ["food", "health"]),             # food 5, health 3
    3: (bytes([0x04]), ["state"]),
    4: (bytes([0x81, 0x01, 0x07]), ["path"]),           # 0x81 | 0x80, 7
    5: (bytes([0x09]), ["target"]),
    6: (bytes([0x02]) + b"ok", ["message"]),
    7: (bytes([0x03]), ["speed"]),
}

_CREATURE_OPTIONAL = [name for _, names in _CREATURE_BITS.values() for name in names]


def _build_creature_frame(mask: int, cno: bytes = b"\x05") -> bytes:
    payload = bytearray(cno)
    payload.append(mask)
    for bit in range(8):
        if mask & (1 << bit):
            payload.extend(_CREATURE_BITS[bit][0])
    return bytes([len(payload), PacketType.CREATURE_UPDATE]) + bytes(payload)


def test_chat_scenario():
    decoder, cursor, _ = _decoder(bytes([0x04, 0x02]) + b"hi!!")
    frame, event = decoder.next_event()
    assert frame == Frame(length=4, type=2)
    assert event == Chat(text="hi!!")
    assert cursor.bytes_read == 6


def test_player_update_without_optional_fields():
    decoder, cursor, _ = _decoder(bytes([0x02, 0x00, 0x01, 0x00]))
    _, event = decoder.next_event()
    assert event == PlayerUpdate(pno=1, mask=0)
    assert event.alive is None and event.name is None and event.score is None
    assert cursor.bytes_read == 4


def test_player_update_all_fields():
    payload = bytes([0x03, 0x1F, 0x01, 0x03]) + b"bob" + bytes([0x07, 0x00, 0x88, 0x04])
    decoder, cursor, _ = _decoder(bytes([len(payload), 0x00]) + payload)
    _, event = decoder.next_event()
    assert event == PlayerUpdate(pno=3, mask=0x1F, alive=True, name="bob", color=7, cpu=0, score=148)
    assert cursor.bytes_read == 2 + len(payload)


def test_player_update_quit_and_negative_score():
    # alive byte 0 means the player quit; single byte score 10 -> -490
    decoder, _, _ = _decoder(bytes([0x04, 0x00, 0x02, 0x11, 0x00, 0x0A]))
    _, event = decoder.next_event()
    assert event.alive is False
    assert event.score == -490
    assert event.name is None


def test_player_update_ignores_frame_length():
    # the length byte does not size player updates
    decoder, cursor, stream = _decoder(bytes([0xFF, 0x00, 0x01, 0x04, 0x09, 0xEE]))
    _, event = decoder.next_event()
    assert event == PlayerUpdate(pno=1, mask=0x04, color=9)
    assert cursor.bytes_read == 5
    assert stream.read() == b"\xee"


def test_transition():
    decoder, _, _ = _decoder(bytes([0x04, 0x01, 10, 20, 3, 255]))
    _, event = decoder.next_event()
    assert event == Transition(a=10, b=20, c=3, d=255)


def test_creature_dead():
    decoder, cursor, _ = _decoder(bytes([0x03, 0x03, 0x05, 0x01, 0xFF]))
    _, event = decoder.next_event()
    assert event == CreatureUpdate(cno=5, mask=1, alive=CreatureDead())
    assert cursor.bytes_read == 5


def test_creature_spawned_and_two_byte_cno():
    decoder, _, _ = _decoder(bytes([0x06, 0x03, 0x81, 0x02, 0x01, 0x00, 0x0A, 0x0B]))
    _, event = decoder.next_event()
    assert event.cno == 385
    assert event.alive == CreatureSpawned(x=10, y=11)


def test_creature_full_update():
    decoder, _, _ = _decoder(_build_creature_frame(0xFF))
    _, event = decoder.next_event()
    assert event == CreatureUpdate(
        cno=5,
        mask=0xFF,
        alive=CreatureSpawned(x=10, y=11),
        ctype=2,
        food=5,
        health=3,
        state=4,
        path=(0x81, 7),
        target=9,
        message="ok",
        speed=3,
    )


@pytest.mark.parametrize("mask", range(256))
def test_creature_mask_controls_fields_and_bytes(mask):
    data = _build_creature_frame(mask)
    decoder, cursor, stream = _decoder(data + b"\xee")
    _, event = decoder.next_event()

    expected = {name for bit, (_, names) in _CREATURE_BITS.items() if mask & (1 << bit) for name in names}
    present = {name for name in _CREATURE_OPTIONAL if getattr(event, name) is not None}
    assert present == expected
    assert event.mask == mask
    assert cursor.bytes_read == len(data)
    assert stream.read() == b"\xee"


def test_quit_message():
    decoder, _, _ = _decoder(bytes([0x03, 0x04]) + b"bye")
    _, event = decoder.next_event()
    assert event == QuitMsg(text="bye")


def test_king():
    decoder, _, _ = _decoder(bytes([0x01, 0x05, 0x07]))
    _, event = decoder.next_event()
    assert event == King(pno=7)


def test_welcome_strips_newline():
    decoder, cursor, _ = _decoder(bytes([0x03, 0x20]) + b"ok\n")
    _, event = decoder.next_event()
    assert event == Welcome(text="ok")
    assert cursor.bytes_read == 5


def test_welcome_removes_inner_newlines_and_trims():
    payload = b"  Welcome\nto Infon \n"
    decoder, _, _ = _decoder(bytes([len(payload), 0x20]) + payload)
    _, event = decoder.next_event()
    assert event.text == "Welcometo Infon"


def test_protocol_version():
    decoder, _, _ = _decoder(bytes([0x01, 0xFF, 0x03]))
    _, event = decoder.next_event()
    assert event == ProtocolVersion(version=3)


def test_unknown_type_skips_payload_and_continues():
    decoder, cursor, _ = _decoder(bytes([0x03, 200, 1, 2, 3, 0x01, 0x05, 0x02]))
    frame, event = decoder.next_event()
    assert frame.packet_type is None
    assert event == Unknown(type=200, raw=b"\x01\x02\x03")
    _, event = decoder.next_event()
    assert event == King(pno=2)
    assert cursor.bytes_read == 8


def test_unknown_type_with_empty_payload():
    decoder, _, _ = _decoder(bytes([0x00, 0x10]))
    _, event = decoder.next_event()
    assert event == Unknown(type=0x10, raw=b"")


def test_frame_packet_type():
    assert Frame(length=0, type=32).packet_type is PacketType.WELCOME
    assert Frame(length=0, type=6).packet_type is None


def test_truncated_known_type_raises_stream_closed():
    # creature update cut off before its mask byte
    decoder, _, _ = _decoder(bytes([0x05, 0x03, 0x05]))
    with pytest.raises(StreamClosed):
        decoder.next_event()


def test_truncated_header_raises_stream_closed():
    decoder, _, _ = _decoder(bytes([0x05]))
    with pytest.raises(StreamClosed):
        decoder.read_frame()


def test_events_serialize():
    event = CreatureUpdate(cno=1, mask=0x11, alive=CreatureSpawned(x=1, y=2), path=(3, 4))
    data = event.as_dict()
    assert data["alive"] == {"state": "spawned", "x": 1, "y": 2}
    assert data["path"] == [3, 4]
    assert data["speed"] is None
    assert Unknown(type=9, raw=b"\x0a\xff").as_dict() == {"type": 9, "raw": "0aff"}
