import argparse
import sys
from typing import Optional, Sequence

from .common import ChunkerError, InvalidSize
from .size import parse_size
from .split import split_file

USAGE = """\
=====================================================
                  CHUNKER - USAGE
=====================================================
Usage: chunker <inputFilePath> <outputPrefix> <chunkSize>
-----------------------------------------------------
- inputFilePath: Path to the input file to be split.
- outputPrefix: Prefix for the output chunk files.
- chunkSize: Size of each chunk. Examples: 1KB, 5MB, 1GB.
- Supported units: B, KB, MB, GB. Default unit is bytes.
-----------------------------------------------------
Example: chunker input.txt outputChunk 5MB
-----------------------------------------------------
For more information, visit: https://github.com/itpey/chunker
====================================================="""


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    # report bad arguments to the caller instead of exiting with status 2
    def error(self, message):
        raise UsageError(message)


def print_usage() -> None:
    print(USAGE)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="chunker",
        description="Split a file into fixed-size chunks.",
        add_help=False,
    )
    parser.add_argument("input_file_path", type=str, help="Path to the input file")
    parser.add_argument(
        "output_prefix", type=str, help="Prefix for the output chunk files"
    )
    parser.add_argument(
        "chunk_size", type=str, help="Size of each chunk, e.g. 1KB, 5MB, 1GB"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != 3:
        print_usage()
        return

    # "--" keeps arguments such as "-part" from being read as options
    try:
        args = build_parser().parse_args(["--", *argv])
    except UsageError:
        print_usage()
        return

    try:
        chunk_size = parse_size(args.chunk_size)
    except InvalidSize as e:
        print("error:", e)
        print_usage()
        return

    try:
        split_file(args.input_file_path, args.output_prefix, chunk_size)
    except ChunkerError as e:
        print("error:", e)


if __name__ == "__main__":
    main()
