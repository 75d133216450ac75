"""Reading, writing and editing of ZTAF animation files (little endian)."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Optional

ZTAF_MAGIC = 0x5A544146
"""The header marker, the bytes ``FATZ`` read as a little-endian u32."""

_FRAME_HEADER_SIZE = 2 * 5


class AnimationError(ValueError):
    """Raised when animation data is malformed or an edit is out of range."""


class _Reader:
    """Sequential little-endian reader over a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(bytes(data))
        self._offset = 0

    def unpack(self, fmt: str) -> int:
        try:
            (value,) = struct.unpack_from("<" + fmt, self._data, self._offset)
        except struct.error as err:
            raise AnimationError(
                f"unexpected end of data at offset {self._offset}"
            ) from err
        self._offset += struct.calcsize("<" + fmt)
        return value

    def u8(self) -> int:
        return self.unpack("B")

    def u16(self) -> int:
        return self.unpack("H")

    def u32(self) -> int:
        return self.unpack("I")

    def boolean(self) -> bool:
        return self.u8() != 0

    def take(self, size: int) -> bytes:
        end = self._offset + size
        if end > len(self._data):
            raise AnimationError(f"unexpected end of data at offset {self._offset}")
        chunk = bytes(self._data[self._offset:end])
        self._offset = end
        return chunk

    def string(self, size: int) -> str:
        return self.take(size).rstrip(b"\x00").decode("utf-8", errors="replace")


@dataclass
class Header:
    """Optional header, not present in all animations."""

    ztaf_string: int = ZTAF_MAGIC
    empty_4_bytes: int = 0
    extra_frame: bool = False


@dataclass
class DrawInstruction:
    """A run of palette-indexed pixels, preceded by ``offset`` transparent pixels."""

    offset: int
    num_colors: int
    colors: list[int] = field(default_factory=list)


@dataclass
class Line:
    """One pixel row of a frame, made of draw instructions."""

    num_draw_instructions: int
    draw_instructions: list[DrawInstruction] = field(default_factory=list)

    def calc_byte_size(self) -> int:
        """Return the number of bytes this line occupies when written."""
        return 1 + sum(2 + len(instr.colors) for instr in self.draw_instructions)


@dataclass
class Frame:
    """A single frame: dimensions, offsets and its pixel rows."""

    num_bytes: int
    pixel_height: int
    pixel_width: int
    vertical_offset_y: int
    horizontal_offset_x: int
    mystery_u16: int
    lines: list[Line] = field(default_factory=list)

    def calc_byte_size(self) -> int:
        """Return the byte count as stored in ``num_bytes``: the frame fields plus its lines."""
        return _FRAME_HEADER_SIZE + sum(line.calc_byte_size() for line in self.lines)


def _encoded_name(name: str) -> bytes:
    return name.encode("utf-8")


@dataclass
class Animation:
    """A ZTAF animation: optional header, speed, palette file and frames."""

    header: Optional[Header]
    animation_speed: int
    palette_filename_length: int
    palette_filename: str
    num_frames: int
    frames: list[Frame] = field(default_factory=list)

    @classmethod
    def parse(cls, data: bytes) -> Animation:
        """Parse animation bytes; trailing extra data is ignored."""
        reader = _Reader(data)
        header: Header | None = None
        first = reader.u32()
        if first == ZTAF_MAGIC:
            header = Header(
                ztaf_string=first,
                empty_4_bytes=reader.u32(),
                extra_frame=reader.boolean(),
            )
            animation_speed = reader.u32()
        else:
            animation_speed = first

        palette_filename_length = reader.u32()
        palette_filename = reader.string(palette_filename_length)
        num_frames = reader.u32()
        frame_count = num_frames + (1 if header is not None and header.extra_frame else 0)

        frames = [cls._parse_frame(reader) for _ in range(frame_count)]
        return cls(
            header=header,
            animation_speed=animation_speed,
            palette_filename_length=palette_filename_length,
            palette_filename=palette_filename,
            num_frames=num_frames,
            frames=frames,
        )

    @staticmethod
    def _parse_frame(reader: _Reader) -> Frame:
        num_bytes = reader.u32()
        pixel_height = reader.u16()
        pixel_width = reader.u16()
        vertical_offset_y = reader.u16()
        horizontal_offset_x = reader.u16()
        mystery_u16 = reader.u16()
        lines = []
        for _ in range(pixel_height):
            num_draw_instructions = reader.u8()
            instructions = []
            for _ in range(num_draw_instructions):
                offset = reader.u8()
                num_colors = reader.u8()
                colors = [reader.u8() for _ in range(num_colors)]
                instructions.append(DrawInstruction(offset, num_colors, colors))
            lines.append(Line(num_draw_instructions, instructions))
        return Frame(
            num_bytes=num_bytes,
            pixel_height=pixel_height,
            pixel_width=pixel_width,
            vertical_offset_y=vertical_offset_y,
            horizontal_offset_x=horizontal_offset_x,
            mystery_u16=mystery_u16,
            lines=lines,
        )

    def to_bytes(self) -> bytes:
        """Serialise the animation, little endian.

        The palette filename is written with its length and a terminating NUL.
        """
        parts: list[bytes] = []
        try:
            if self.header is not None:
                parts.append(
                    struct.pack(
                        "<IIB",
                        self.header.ztaf_string,
                        self.header.empty_4_bytes,
                        1 if self.header.extra_frame else 0,
                    )
                )
            parts.append(struct.pack("<I", self.animation_speed))
            name = _encoded_name(self.palette_filename) + b"\x00"
            parts.append(struct.pack("<I", len(name)))
            parts.append(name)
            parts.append(struct.pack("<I", self.num_frames))
            for frame in self.frames:
                parts.append(
                    struct.pack(
                        "<IHHHHH",
                        frame.num_bytes,
                        frame.pixel_height,
                        frame.pixel_width,
                        frame.vertical_offset_y,
                        frame.horizontal_offset_x,
                        frame.mystery_u16,
                    )
                )
                for line in frame.lines:
                    parts.append(struct.pack("<B", line.num_draw_instructions))
                    for instr in line.draw_instructions:
                        parts.append(struct.pack("<BB", instr.offset, instr.num_colors))
                        parts.append(bytes(instr.colors))
        except (struct.error, ValueError) as err:
            raise AnimationError(f"value out of range for animation format: {err}") from err
        return b"".join(parts)

    def duplicate_pixel_rows(self, frame: int, start_index: int, end_index: int) -> Animation:
        """Repeat rows ``start_index:end_index`` of a frame right after themselves.

        The frame's pixel height and byte count grow accordingly.
        """
        if start_index > end_index:
            raise AnimationError("Start index must be less than end index")
        if frame < 0 or frame >= len(self.frames):
            raise AnimationError("Frame index out of bounds")
        target = self.frames[frame]
        if start_index < 0 or len(target.lines) < end_index:
            raise AnimationError("End index out of bounds")

        copies = [
            Line(line.num_draw_instructions, [
                DrawInstruction(instr.offset, instr.num_colors, list(instr.colors))
                for instr in line.draw_instructions
            ])
            for line in target.lines[start_index:end_index]
        ]
        target.lines[end_index:end_index] = copies
        target.num_bytes += sum(line.calc_byte_size() for line in copies)
        target.pixel_height += end_index - start_index
        return self

    def set_palette_filename(self, palette_filename: str) -> None:
        """Replace the palette filename and update its stored length."""
        self.palette_filename = palette_filename
        self.palette_filename_length = len(_encoded_name(palette_filename)) + 1