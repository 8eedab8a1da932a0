"""Reading PCM sound data from RIFF/WAVE files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

_CHUNK_HEADER = struct.Struct("<4si")
_WAVE_FORMAT = struct.Struct("<HHIIHHH")


class WaveFormatError(ValueError):
    """Raised when a file is not a WAVE file this loader understands."""


@dataclass(frozen=True)
class WaveFormat:
    """The fields of a WAVE ``fmt `` chunk."""

    format_tag: int = 0
    channels: int = 0
    samples_per_sec: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    cb_size: int = 0

    SIZE = _WAVE_FORMAT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> WaveFormat:
        """Parse up to ``SIZE`` bytes; fields past the end of ``data`` are zero."""
        if len(data) > cls.SIZE:
            raise WaveFormatError(
                f"format chunk of {len(data)} bytes is larger than {cls.SIZE}"
            )
        return cls(*_WAVE_FORMAT.unpack(data.ljust(cls.SIZE, b"\0")))

    def to_bytes(self) -> bytes:
        return _WAVE_FORMAT.pack(
            self.format_tag,
            self.channels,
            self.samples_per_sec,
            self.avg_bytes_per_sec,
            self.block_align,
            self.bits_per_sample,
            self.cb_size,
        )


@dataclass
class SoundData:
    """Decoded sample bytes and the format that describes them."""

    wave_format: WaveFormat = field(default_factory=WaveFormat)
    buffer: bytes = b""
    play_sound_length: int = 0

    @property
    def buffer_size(self) -> int:
        return len(self.buffer)

    def unload(self) -> None:
        """Release the sample bytes and clear the format."""
        self.buffer = b""
        self.wave_format = WaveFormat()


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise WaveFormatError(f"unexpected end of file while reading {what}")
    return data


def _read_chunk_header(stream: BinaryIO) -> tuple[bytes, int]:
    chunk_id, size = _CHUNK_HEADER.unpack(
        _read_exact(stream, _CHUNK_HEADER.size, "a chunk header")
    )
    if size < 0:
        raise WaveFormatError(f"chunk {chunk_id!r} has a negative size")
    return chunk_id, size


def load_wave(filename: str | Path) -> SoundData:
    """Load a WAVE file: RIFF header, ``fmt `` chunk, optional ``JUNK``, then ``data``."""
    with open(filename, "rb") as stream:
        riff_id, _ = _read_chunk_header(stream)
        if riff_id != b"RIFF":
            raise WaveFormatError("file does not start with a RIFF header")
        if _read_exact(stream, 4, "the RIFF type") != b"WAVE":
            raise WaveFormatError("RIFF file is not of type WAVE")

        fmt_id, fmt_size = _read_chunk_header(stream)
        if fmt_id != b"fmt ":
            raise WaveFormatError("expected a 'fmt ' chunk after the RIFF header")
        if fmt_size > WaveFormat.SIZE:
            raise WaveFormatError(
                f"format chunk of {fmt_size} bytes is larger than {WaveFormat.SIZE}"
            )
        wave_format = WaveFormat.from_bytes(_read_exact(stream, fmt_size, "the format"))

        data_id, data_size = _read_chunk_header(stream)
        if data_id == b"JUNK":
            _read_exact(stream, data_size, "the JUNK chunk")
            data_id, data_size = _read_chunk_header(stream)
        if data_id != b"data":
            raise WaveFormatError("expected a 'data' chunk")

        buffer = _read_exact(stream, data_size, "the sample data")

    if wave_format.block_align == 0:
        raise WaveFormatError("format has a block alignment of zero")
    return SoundData(
        wave_format=wave_format,
        buffer=buffer,
        play_sound_length=data_size // wave_format.block_align,
    )