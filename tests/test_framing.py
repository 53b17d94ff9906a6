import pytest

from framechat.framing import (
    MAX_FRAME_SIZE,
    FrameDecoder,
    FrameTooLarge,
    encode_frame,
)


def test_encode_wire_bytes():
    assert encode_frame(b"hi") == b"\x00\x00\x00\x02hi"
    assert encode_frame("") == b"\x00\x00\x00\x00"


def test_encode_str_matches_bytes():
    text = '{"type":"message"}'
    assert encode_frame(text) == encode_frame(text.encode())


def test_round_trip_several_frames():
    payloads = [b'{"type":"message"}', b"x", b"abc" * 100]
    decoder = FrameDecoder()
    data = b"".join(encode_frame(p) for p in payloads)
    assert list(decoder.feed(data)) == payloads
    assert decoder.pending() == 0


def test_split_across_feeds():
    decoder = FrameDecoder()
    wire = encode_frame(b"hello world")
    assert list(decoder.feed(wire[:2])) == []
    assert decoder.pending() == 2
    assert list(decoder.feed(wire[2:7])) == []
    assert list(decoder.feed(wire[7:])) == [b"hello world"]
    assert decoder.pending() == 0


def test_partial_tail_stays_buffered():
    decoder = FrameDecoder()
    first = encode_frame(b"one")
    second = encode_frame(b"two")
    assert list(decoder.feed(first + second[:5])) == [b"one"]
    assert decoder.pending() == 5
    assert list(decoder.feed(second[5:])) == [b"two"]


def test_empty_frames_are_skipped(capsys):
    decoder = FrameDecoder()
    data = encode_frame(b"") + encode_frame(b"after")
    assert list(decoder.feed(data)) == [b"after"]
    assert "Empty frame" in capsys.readouterr().out


def test_limit_is_inclusive():
    decoder = FrameDecoder()
    payload = b"a" * MAX_FRAME_SIZE
    assert list(decoder.feed(encode_frame(payload))) == [payload]


def test_oversized_frame_raises_after_earlier_frames():
    decoder = FrameDecoder()
    data = encode_frame(b"ok") + (MAX_FRAME_SIZE + 1).to_bytes(4, "big")
    frames = decoder.feed(data)
    assert next(frames) == b"ok"
    with pytest.raises(FrameTooLarge) as info:
        next(frames)
    assert info.value.length == MAX_FRAME_SIZE + 1
    assert info.value.max_size == MAX_FRAME_SIZE


def test_custom_limit():
    decoder = FrameDecoder(4)
    with pytest.raises(FrameTooLarge):
        list(decoder.feed(encode_frame(b"12345")))