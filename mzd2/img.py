"""Loading images from disk or memory, and encoding PNG and QOI cache images."""

from __future__ import annotations

import io
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, Union

from PIL import Image, UnidentifiedImageError

from .qoi import QoiError, qoi_decode, qoi_encode

PathLike = Union[str, "os.PathLike[str]"]

ADAPTIVE_THRESHOLD = 32 * 1024 * 1024
_READ_BUFFER = 32768

_DECODE_ERRORS = (
    UnidentifiedImageError,
    OSError,
    SyntaxError,
    ValueError,
    EOFError,
    Image.DecompressionBombError,
)


class ImageLoadError(Exception):
    """Raised when image data cannot be identified or decoded."""


def _require_rgba(image: Image.Image) -> None:
    if image.mode != "RGBA":
        raise ValueError(f"expected an RGBA image, got mode {image.mode}")


def _decode(source: BinaryIO, formats: Optional[Sequence[str]] = None) -> Image.Image:
    try:
        image = Image.open(source, formats=formats)
        image.load()
    except _DECODE_ERRORS as exc:
        raise ImageLoadError(str(exc)) from exc
    return image


def write_png(stream: BinaryIO, image: Image.Image) -> None:
    """Write an RGBA image to ``stream`` as PNG at the strongest compression."""
    _require_rgba(image)
    image.save(stream, format="PNG", optimize=True, compress_level=9)


def encode_cache_qoi(image: Image.Image) -> bytes:
    """Encode an RGBA image as QOI for the on-disk cache."""
    _require_rgba(image)
    return qoi_encode(image.width, image.height, image.tobytes())


def decode_cache_qoi(data: bytes) -> Image.Image:
    """Decode a cached QOI image, which must hold RGBA pixels."""
    try:
        decoded = qoi_decode(data)
    except QoiError as exc:
        raise ImageLoadError(str(exc)) from exc
    if decoded.channels != 4:
        raise ImageLoadError("Decoded cached image is wrong pixel format")
    return Image.frombytes("RGBA", (decoded.width, decoded.height), decoded.pixels)


def load_image(path: PathLike) -> Image.Image:
    """Decode an image file, detecting the format from its contents."""
    with open(path, "rb", buffering=_READ_BUFFER) as stream:
        return _decode(stream)


def read_file_and_load_image(path: PathLike) -> Image.Image:
    """Read the whole file into memory, then decode it."""
    data = Path(path).read_bytes()
    return load_image_from_memory(data, path)


def load_image_from_memory(data: bytes, path: PathLike) -> Image.Image:
    """Decode ``data``, detecting the format from magic bytes or else from ``path``'s extension."""
    try:
        return _decode(io.BytesIO(data))
    except ImageLoadError:
        fmt = Image.registered_extensions().get(Path(path).suffix.lower())
        if fmt is None:
            raise
    return _decode(io.BytesIO(data), formats=[fmt])


def load_image_adaptive(path: PathLike) -> Image.Image:
    """Decode small files from memory and large ones by streaming."""
    info = os.stat(path)
    if not stat.S_ISREG(info.st_mode):
        raise IsADirectoryError(f"not a regular file: {os.fspath(path)}")
    if info.st_size > ADAPTIVE_THRESHOLD:
        return load_image(path)
    return read_file_and_load_image(path)


def load_image_off_thread(path: PathLike) -> Image.Image:
    """Decode an image on a worker thread and return the result."""
    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(load_image, path).result()