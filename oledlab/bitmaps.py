"""Monochrome ball sprites for radii 5 to 14, stored row by row, MSB first."""

from __future__ import annotations

BITMAPS: dict[int, bytes] = {
    10: bytes.fromhex(
        "02 00 3f 00 7e 00 38 40 b8 c0 f0 c0 02 c0 4f 80 3f 80 1e 00"
    ),
    12: bytes.fromhex(
        "1b 00 13 40 7f 00 7e 20 bc 00 fc 10 d8 00 e0 40 73 60 73 60 3b 40 0f 00"
    ),
    14: bytes.fromhex(
        "03 80 01 c0 3f d8 3e 78 7e 00 7f 04 de 04 c4 04 e0 64 50 60 20 e0 73 f0"
        " 3f e0 07 c0"
    ),
    16: bytes.fromhex(
        "07 e0 1c 78 31 ec 7f 66 5f 02 df 00 9f 01 8e 01 c0 01 b0 01 f0 08 60 3a"
        " 60 74 31 e8 0c 30 01 80"
    ),
    18: bytes.fromhex(
        "03 f0 00 0f fc 00 1c 7e 00 3f fb 00"
        " 7f 81 80 ff 80 80 df 80 00 df 80 c0"
        " ef 00 40 e0 00 00 f8 00 c0 f8 00 00"
        " f0 00 80 70 01 80 31 7b 00 10 00 00"
        " 07 f8 00 01 e0 00"
    ),
    20: bytes.fromhex(
        "01 f8 00 0f ff 00 1e 3f 80 3a fd c0"
        " 7f fe e0 7f c0 60 ff c0 20 df c0 00"
        " df c0 30 e7 80 10 e0 00 00 f8 00 30"
        " fc 00 00 f8 05 20 70 01 60 70 04 40"
        " 38 bd c0 18 00 00 07 fe 00 00 f0 00"
    ),
    22: bytes.fromhex(
        "00 78 00 03 ff 00 0e 01 c0 18 2c e0"
        " 33 af 30 6f c2 10 6f e0 08 4f e0 08"
        " cf e0 04 c7 c0 04 c3 80 04 e0 00 04"
        " c0 00 04 dc 00 04 58 00 68 60 00 c8"
        " 70 03 90 38 0f b0 1c 3e 60 0c f8 c0"
        " 03 ef 00 00 78 00"
    ),
    24: bytes.fromhex(
        "00 00 00 01 ff 80 03 00 e0 0c"
        " 06 30 18 3f 1c 33 e1 9c 27 e0"
        " 06 6f e0 06 4f f0 03 47 e0 03"
        " 07 e0 01 c1 80 03 c0 00 03 00"
        " 00 01 4c 00 03 5e 00 4b 64 00"
        " 02 20 00 46 38 07 ec 3c 06 9c"
        " 1e 00 10 0f 76 60 03 ff c0 00"
        " 34 00"
    ),
    26: bytes.fromhex(
        "00 1e 00 00 00 ff c0 00 03 c0"
        " f0 00 0e 03 18 00 1c 1b ce 00"
        " 19 f9 c7 00 37 f0 43 80 67 f0"
        " 03 80 67 f8 01 c0 47 f8 00 c0"
        " c7 f0 00 c0 c3 f0 00 c0 c1 c0"
        " 00 c0 e0 00 00 c0 c0 00 00 c0"
        " cc 00 00 c0 4e 00 0d c0 6e 01"
        " dd c0 70 03 ff 80 38 03 ff 00"
        " 3c 03 c7 00 1e 03 ce 00 0f ff"
        " dc 00 07 ff f8 00 01 ff e0 00"
        " 00 7f 00 00"
    ),
    28: bytes.fromhex(
        "00 00 00 00 00 7f e0 00 01 e0"
        " f8 00 03 80 1c 00 0e 05 c7 00"
        " 1c cd f3 00 19 f0 30 c0 33 f8"
        " 00 e0 67 f8 00 60 67 fc 00 20"
        " 47 f8 00 30 c3 f8 00 30 c3 f8"
        " 00 30 c1 f0 00 30 f0 00 00 30"
        " c0 00 00 30 c0 00 00 30 ce 00"
        " 00 30 4f 00 00 30 66 00 0c 20"
        " 60 00 7e 60 38 00 fc e0 3c 01"
        " fc c0 1e 1b fb 80 0f ff e7 00"
        " 07 db 9e 00 01 f0 f8 00 00 ff"
        " f0 00"
    ),
}

_ORDERED = tuple(BITMAPS[d] for d in sorted(BITMAPS))
MIN_RADIUS = 5


def bitmap_for_radius(radius: float) -> bytes:
    """Sprite for a ball of ``radius``; the fractional part is dropped."""
    index = int(radius - float(MIN_RADIUS))
    if not 0 <= index < len(_ORDERED):
        raise ValueError(f"no ball bitmap for radius {radius}")
    return _ORDERED[index]


def bitmap_rows(data: bytes, width: int, height: int) -> tuple[tuple[bool, ...], ...]:
    """Unpack a row-padded, MSB-first bitmap into rows of lit/unlit pixels."""
    if width < 1 or height < 1:
        raise ValueError(f"bitmap size must be positive, got {width}x{height}")
    stride = (width + 7) // 8
    if len(data) < stride * height:
        raise ValueError(
            f"{width}x{height} bitmap needs {stride * height} bytes, got {len(data)}"
        )
    return tuple(
        tuple(bool(data[row * stride + col // 8] & (0x80 >> (col & 7))) for col in range(width))
        for row in range(height)
    )