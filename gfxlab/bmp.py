"""Reading uncompressed 8-bit indexed and 24-bit BMP images."""

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

_FILE_HEADER = struct.Struct("<hihhi")
_INFO_HEADER = struct.Struct("<iiihhIIiiii")
_PALETTE_OFFSET = _FILE_HEADER.size + _INFO_HEADER.size
_PALETTE_SIZE = 256 * 4
_BMP_MAGIC = 0x4D42

PathType = Union[str, PathLike]


class BmpError(ValueError):
    """Raised when data is not a BMP image of the requested kind."""


@dataclass(frozen=True)
class Image:
    """Pixels stored row after row in file order, ``channels`` bytes each."""

    width: int
    height: int
    channels: int
    data: bytes

    def __post_init__(self):
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(
                f"image data holds {len(self.data)} bytes, expected {expected}"
            )


@dataclass(frozen=True)
class _Headers:
    offset: int
    width: int
    height: int
    bits_per_pixel: int
    compression: int


def _read_headers(data, bits_per_pixel):
    if len(data) < _FILE_HEADER.size:
        raise BmpError("truncated file header")
    magic, _size, _r1, _r2, offset = _FILE_HEADER.unpack_from(data, 0)
    if magic != _BMP_MAGIC:
        raise BmpError("not a bitmap file")
    if len(data) < _PALETTE_OFFSET:
        raise BmpError("truncated info header")
    fields = _INFO_HEADER.unpack_from(data, _FILE_HEADER.size)
    headers = _Headers(
        offset=offset,
        width=fields[1],
        height=fields[2],
        bits_per_pixel=fields[4],
        compression=fields[5],
    )
    if headers.bits_per_pixel != bits_per_pixel:
        raise BmpError(
            f"expected {bits_per_pixel} bits per pixel, "
            f"found {headers.bits_per_pixel}"
        )
    if headers.compression:
        raise BmpError("compressed bitmaps are not supported")
    if headers.width < 0 or headers.height < 0:
        raise BmpError("negative image dimensions")
    if headers.offset < 0:
        raise BmpError("negative pixel data offset")
    return headers


def _rows(data, headers, bytes_per_pixel) -> Iterator[bytes]:
    # Row padding depends on the pixel count alone, whatever the pixel size.
    padding = (4 - (headers.width & 3)) & 3
    row_bytes = headers.width * bytes_per_pixel
    stride = row_bytes + padding
    for y in range(headers.height):
        start = headers.offset + y * stride
        row = data[start:start + row_bytes]
        if len(row) != row_bytes:
            raise BmpError("truncated pixel data")
        yield row


def read_indexed_bmp(data):
    """Decode an 8-bit palettised BMP into RGB pixels."""
    data = bytes(data)
    headers = _read_headers(data, 8)
    palette_bytes = data[_PALETTE_OFFSET:_PALETTE_OFFSET + _PALETTE_SIZE]
    if len(palette_bytes) != _PALETTE_SIZE:
        raise BmpError("truncated palette")
    colors = [
        bytes((palette_bytes[i + 2], palette_bytes[i + 1], palette_bytes[i]))
        for i in range(0, _PALETTE_SIZE, 4)
    ]
    pixels = b"".join(
        b"".join(colors[index] for index in row) for row in _rows(data, headers, 1)
    )
    return Image(headers.width, headers.height, 3, pixels)


def read_truecolor_bmp(data):
    """Decode a 24-bit BMP into RGB pixels."""
    data = bytes(data)
    headers = _read_headers(data, 24)
    pixels = bytearray()
    for row in _rows(data, headers, 3):
        rgb = bytearray(len(row))
        rgb[0::3] = row[2::3]
        rgb[1::3] = row[1::3]
        rgb[2::3] = row[0::3]
        pixels += rgb
    return Image(headers.width, headers.height, 3, bytes(pixels))


def load_indexed_bmp(path: PathType):
    """Read and decode an 8-bit palettised BMP file."""
    with open(path, "rb") as handle:
        return read_indexed_bmp(handle.read())


def load_truecolor_bmp(path: PathType):
    """Read and decode a 24-bit BMP file."""
    with open(path, "rb") as handle:
        return read_truecolor_bmp(handle.read())


def combine_alpha(color, alpha):
    """Build an RGBA image whose alpha is the mean brightness of ``alpha``."""
    if color.channels != 3 or alpha.channels != 3:
        raise BmpError("both images must be RGB")
    if (color.width, color.height) != (alpha.width, alpha.height):
        raise BmpError("colour and alpha images differ in size")
    rgba = bytearray(color.width * color.height * 4)
    rgba[0::4] = color.data[0::3]
    rgba[1::4] = color.data[1::3]
    rgba[2::4] = color.data[2::3]
    rgba[3::4] = bytes(
        (r + g + b) // 3
        for r, g, b in zip(alpha.data[0::3], alpha.data[1::3], alpha.data[2::3])
    )
    return Image(color.width, color.height, 4, bytes(rgba))


def construct_texture(color_path: PathType, alpha_path: PathType):
    """Load a colour and an alpha BMP and merge them into one RGBA texture."""
    return combine_alpha(load_truecolor_bmp(color_path), load_truecolor_bmp(alpha_path))