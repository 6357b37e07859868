"""Command line: compress a file, then decompress the result."""

from __future__ import annotations

import argparse

from huffpack.compressor import CompressionError, compress_file
from huffpack.decompressor import DecompressionError, decompress_file


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="huffpack",
        description="Compress a file with Huffman coding and decompress it again.",
    )
    parser.add_argument("original", help="file to compress")
    parser.add_argument("--compressed", default="saida.huff", help="compressed output")
    parser.add_argument(
        "--output", default="saida_descompactado.txt", help="decompressed output"
    )
    args = parser.parse_args(argv)

    print(f"Compressing file: {args.original}")
    try:
        compress_file(args.original, args.compressed)
    except CompressionError as exc:
        print(f"Error compressing the file: {exc}")
        return 1
    print(f"File compressed successfully: {args.compressed}")

    print(f"Decompressing file: {args.compressed}")
    try:
        decompress_file(args.compressed, args.output)
    except DecompressionError as exc:
        print(f"Error decompressing the file: {exc}")
        return 1
    print(f"File decompressed successfully: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())