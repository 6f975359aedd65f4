import random
import struct

import pytest

from mzd2.qoi import END_MARKER, MAGIC, QoiError, qoi_decode, qoi_encode


def _random_pixels(count, seed):
    rng = random.Random(seed)
    out = bytearray()
    px = [10, 20, 30, 255]
    for _ in range(count):
        choice = rng.random()
        if choice < 0.3:
            pass  # repeat
        elif choice < 0.5:
            px = [(c + rng.randint(-2, 1)) % 256 for c in px[:3]] + [px[3]]
        elif choice < 0.7:
            d = rng.randint(-30, 30)
            px = [(c + d + rng.randint(-7, 7)) % 256 for c in px[:3]] + [px[3]]
        elif choice < 0.85:
            px = [rng.randrange(256) for _ in range(3)] + [px[3]]
        else:
            px = [rng.randrange(256) for _ in range(4)]
        out += bytes(px)
    return bytes(out)


def test_header_and_end_marker():
    encoded = qoi_encode(3, 2, bytes(3 * 2 * 4))
    assert encoded[:4] == b"qoif"
    assert encoded[4:14] == struct.pack(">IIBB", 3, 2, 4, 0)
    assert encoded[-8:] == b"\x00\x00\x00\x00\x00\x00\x00\x01"


def test_single_opaque_black_pixel_is_one_run():
    encoded = qoi_encode(1, 1, bytes((0, 0, 0, 255)))
    assert encoded == MAGIC + struct.pack(">IIBB", 1, 1, 4, 0) + b"\xc0" + END_MARKER


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_round_trip_random(seed):
    width, height = 17, 9
    raw = _random_pixels(width * height, seed)
    decoded = qoi_decode(qoi_encode(width, height, raw))
    assert (decoded.width, decoded.height, decoded.channels) == (width, height, 4)
    assert decoded.pixels == raw


def test_long_runs_round_trip_and_compress():
    raw = bytes((5, 6, 7, 8)) * 200 + bytes((9, 9, 9, 9)) * 130
    encoded = qoi_encode(330, 1, raw)
    assert len(encoded) < len(raw) // 10
    assert qoi_decode(encoded).pixels == raw


def test_three_channel_header_decodes_rgb():
    raw = _random_pixels(12, 7)
    encoded = bytearray(qoi_encode(4, 3, raw))
    encoded[12] = 3
    decoded = qoi_decode(bytes(encoded))
    assert decoded.channels == 3
    expected = b"".join(raw[i:i + 3] for i in range(0, len(raw), 4))
    assert decoded.pixels == expected


def test_encode_rejects_wrong_length():
    with pytest.raises(QoiError):
        qoi_encode(2, 2, bytes(15))


@pytest.mark.parametrize("size", [(0, 4), (4, 0)])
def test_encode_rejects_empty_dimensions(size):
    with pytest.raises(QoiError):
        qoi_encode(size[0], size[1], b"")


def test_decode_rejects_bad_magic():
    encoded = bytearray(qoi_encode(2, 2, _random_pixels(4, 1)))
    encoded[0:4] = b"qoix"
    with pytest.raises(QoiError):
        qoi_decode(bytes(encoded))


def test_decode_rejects_truncated_chunks():
    raw = bytes(range(64))
    encoded = qoi_encode(4, 4, raw)
    body = encoded[:-8]
    with pytest.raises(QoiError):
        qoi_decode(body[:-4] + END_MARKER)


def test_decode_rejects_bad_padding():
    encoded = qoi_encode(2, 2, _random_pixels(4, 2))
    with pytest.raises(QoiError):
        qoi_decode(encoded[:-1] + b"\x02")


def test_decode_rejects_short_input():
    with pytest.raises(QoiError):
        qoi_decode(b"qoif")