import os
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Optional

from .common import (
    ByteCount,
    CopyError,
    InputOpenError,
    InvalidMagnitude,
    OutputCreateError,
)

# upper bound of a single read, so a 1GB chunk is not held in memory at once
COPY_BUFFER_SIZE = 1024 * 1024


@dataclass
class SplitResult:
    chunks: list[str] = field(default_factory=list)
    bytes_written: ByteCount = 0


def print_chunk_created(chunk_path: str) -> None:
    print(f"Chunk {chunk_path} created.")


def chunk_name(output_prefix: str, index: int) -> str:
    return f"{output_prefix}_{index}"


def copy_n(src: BinaryIO, dst: BinaryIO, n: ByteCount) -> ByteCount:
    """
    Copy at most `n` bytes from `src` to `dst`.

    Returns the number of bytes copied, which is less than `n` only when `src`
    reached end of file.
    """
    written = 0
    while written < n:
        buf = src.read(min(COPY_BUFFER_SIZE, n - written))
        if not buf:
            break
        dst.write(buf)
        written += len(buf)
    return written


def split_file(
    input_path: str,
    output_prefix: str,
    chunk_size: ByteCount,
    on_chunk: Optional[Callable[[str], None]] = print_chunk_created,
) -> SplitResult:
    """
    Split `input_path` into files named ``<output_prefix>_1``, ``<output_prefix>_2``, ...

    Every chunk holds `chunk_size` bytes except the last one, which holds the
    remainder. Existing chunk files with the same names are overwritten. When
    an error is raised, chunks written so far are left on disk.

    Args:
        input_path: file to split
        output_prefix: path prefix of the chunk files
        chunk_size: maximum number of bytes per chunk
        on_chunk: called with the path of each chunk once it is closed

    Raises:
        InvalidMagnitude: `chunk_size` is not positive
        InputOpenError: the input file cannot be opened
        OutputCreateError: a chunk file cannot be created
        CopyError: reading the input or writing a chunk failed
    """
    if chunk_size <= 0:
        raise InvalidMagnitude(f"chunk size must be positive, got {chunk_size}")

    try:
        infile = open(input_path, "rb")
    except OSError as err:
        raise InputOpenError(f"error opening input file: {err}") from err

    result = SplitResult()

    with infile:
        index = 1
        while True:
            output_path = chunk_name(output_prefix, index)
            try:
                outfile = open(output_path, "wb")
            except OSError as err:
                raise OutputCreateError(f"error creating output file: {err}") from err

            try:
                with outfile:
                    written = copy_n(infile, outfile, chunk_size)
            except OSError as err:
                raise CopyError(f"error writing chunk {output_path}: {err}") from err

            # input was already exhausted when this chunk was opened
            if written == 0:
                try:
                    os.remove(output_path)
                except OSError as err:
                    raise CopyError(
                        f"error removing empty chunk {output_path}: {err}"
                    ) from err
                break

            result.chunks.append(output_path)
            result.bytes_written += written
            if on_chunk is not None:
                on_chunk(output_path)

            index += 1

    return result
