"""Encoder and decoder for the QOI lossless image format."""

from __future__ import annotations

import struct
from typing import List, NamedTuple, Tuple

MAGIC = b"qoif"
END_MARKER = b"\x00" * 7 + b"\x01"
_HEADER = struct.Struct(">IIBB")
HEADER_SIZE = len(MAGIC) + _HEADER.size
PIXELS_MAX = 400_000_000

_OP_INDEX = 0x00
_OP_DIFF = 0x40
_OP_LUMA = 0x80
_OP_RUN = 0xC0
_OP_RGB = 0xFE
_OP_RGBA = 0xFF
_MASK_2 = 0xC0
_MAX_RUN = 62

Pixel = Tuple[int, int, int, int]


class QoiError(ValueError):
    """Raised for malformed QOI data or unusable image dimensions."""


class QoiImage(NamedTuple):
    """A decoded QOI image; ``pixels`` holds ``channels`` bytes per pixel."""

    width: int
    height: int
    channels: int
    colorspace: int
    pixels: bytes


def _hash(px: Pixel) -> int:
    r, g, b, a = px
    return (r * 3 + g * 5 + b * 7 + a * 11) % 64


def _wrap(v: int) -> int:
    return ((v + 128) & 0xFF) - 128


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise QoiError(f"invalid image size {width}x{height}")
    if width * height >= PIXELS_MAX:
        raise QoiError(f"image too large: {width}x{height}")


def qoi_encode(width: int, height: int, rgba: bytes) -> bytes:
    """Encode ``width * height`` RGBA pixels as a 4-channel sRGB QOI image."""
    _check_dimensions(width, height)
    data = bytes(rgba)
    total = width * height
    if len(data) != total * 4:
        raise QoiError(f"expected {total * 4} bytes of RGBA data, got {len(data)}")

    out = bytearray(MAGIC)
    out += _HEADER.pack(width, height, 4, 0)
    index: List[Pixel] = [(0, 0, 0, 0)] * 64
    prev: Pixel = (0, 0, 0, 255)
    run = 0

    for count, px in enumerate(zip(*[iter(data)] * 4), 1):
        if px == prev:
            run += 1
            if run == _MAX_RUN or count == total:
                out.append(_OP_RUN | (run - 1))
                run = 0
            continue
        if run:
            out.append(_OP_RUN | (run - 1))
            run = 0

        slot = _hash(px)
        r, g, b, a = px
        if index[slot] == px:
            out.append(_OP_INDEX | slot)
        else:
            index[slot] = px
            if a == prev[3]:
                vr = _wrap(r - prev[0])
                vg = _wrap(g - prev[1])
                vb = _wrap(b - prev[2])
                vg_r = vr - vg
                vg_b = vb - vg
                if -3 < vr < 2 and -3 < vg < 2 and -3 < vb < 2:
                    out.append(_OP_DIFF | (vr + 2) << 4 | (vg + 2) << 2 | (vb + 2))
                elif -9 < vg_r < 8 and -33 < vg < 32 and -9 < vg_b < 8:
                    out += bytes((_OP_LUMA | (vg + 32), (vg_r + 8) << 4 | (vg_b + 8)))
                else:
                    out += bytes((_OP_RGB, r, g, b))
            else:
                out += bytes((_OP_RGBA, r, g, b, a))
        prev = px

    out += END_MARKER
    return bytes(out)


def qoi_decode(data: bytes) -> QoiImage:
    """Decode a QOI image, keeping the channel count stored in its header."""
    data = bytes(data)
    if len(data) < HEADER_SIZE + len(END_MARKER):
        raise QoiError("data too short for a QOI image")
    if data[: len(MAGIC)] != MAGIC:
        raise QoiError("missing QOI magic bytes")
    width, height, channels, colorspace = _HEADER.unpack_from(data, len(MAGIC))
    _check_dimensions(width, height)
    if channels not in (3, 4):
        raise QoiError(f"invalid channel count {channels}")
    if colorspace > 1:
        raise QoiError(f"invalid colorspace {colorspace}")
    if data[-len(END_MARKER):] != END_MARKER:
        raise QoiError("invalid end marker")

    chunks_end = len(data) - len(END_MARKER)
    pos = HEADER_SIZE

    def take(n: int) -> bytes:
        nonlocal pos
        if pos + n > chunks_end:
            raise QoiError("unexpected end of QOI data")
        chunk = data[pos:pos + n]
        pos += n
        return chunk

    out = bytearray()
    index: List[Pixel] = [(0, 0, 0, 0)] * 64
    px: Pixel = (0, 0, 0, 255)
    run = 0

    for _ in range(width * height):
        if run:
            run -= 1
        else:
            b1 = take(1)[0]
            if b1 == _OP_RGB:
                r, g, b = take(3)
                px = (r, g, b, px[3])
            elif b1 == _OP_RGBA:
                r, g, b, a = take(4)
                px = (r, g, b, a)
            else:
                tag = b1 & _MASK_2
                if tag == _OP_INDEX:
                    px = index[b1]
                elif tag == _OP_DIFF:
                    px = (
                        (px[0] + ((b1 >> 4) & 0x03) - 2) & 0xFF,
                        (px[1] + ((b1 >> 2) & 0x03) - 2) & 0xFF,
                        (px[2] + (b1 & 0x03) - 2) & 0xFF,
                        px[3],
                    )
                elif tag == _OP_LUMA:
                    b2 = take(1)[0]
                    vg = (b1 & 0x3F) - 32
                    px = (
                        (px[0] + vg - 8 + ((b2 >> 4) & 0x0F)) & 0xFF,
                        (px[1] + vg) & 0xFF,
                        (px[2] + vg - 8 + (b2 & 0x0F)) & 0xFF,
                        px[3],
                    )
                else:
                    run = b1 & 0x3F
            index[_hash(px)] = px
        out += bytes(px[:channels])

    return QoiImage(width, height, channels, colorspace, bytes(out))