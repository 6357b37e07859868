# huffpack

A small Huffman coding compressor. It counts how often each byte occurs,
builds a Huffman tree from those counts, and writes the tree followed by the
bit-packed codes of the input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `huffpack` command. It compresses a file
and then decompresses the result, printing a message before and after each
step:

```
huffpack input.txt
huffpack input.txt --compressed packed.huff --output restored.txt
```

- `original` (positional): the file to compress.
- `--compressed`: where to write the compressed file (default `saida.huff`).
- `--output`: where to write the decompressed file
  (default `saida_descompactado.txt`).

The command exits with status 0 on success and 1 if either step fails.
Run `huffpack --help` for the full usage text.

## Library use

Work on bytes in memory:

```python
from huffpack.compressor import compress
from huffpack.decompressor import decompress

packed = compress(b"abracadabra")
print(decompress(packed))   # b'abracadabraa' - see "Limitations" below
```

Or on files:

```python
from huffpack.compressor import compress_file
from huffpack.decompressor import decompress_file

compress_file("input.txt", "output.huff")
decompress_file("output.huff", "restored.txt")
```

Failures raise `huffpack.compressor.CompressionError` (empty input, or a
file that cannot be read or written) or
`huffpack.decompressor.DecompressionError` (a truncated or malformed tree,
a missing separator, or a file that cannot be read or written).

The building blocks are available as well:

- `huffpack.frequency.FrequencyTable` counts byte frequencies
  (`FrequencyTable.from_bytes(data)`, `include_byte`, `frequency_of`) and
  orders its nodes by ascending frequency with `sort_by_frequency`, ties
  keeping their order of first appearance. Its entries are
  `huffpack.frequency.Node` objects.
- `huffpack.tree.build_tree(table)` builds the Huffman tree (or returns
  `None` for an empty table) and `huffpack.tree.generate_codes(root)` maps
  every byte in the tree to its `Code` (0 for left, 1 for right).
- `huffpack.bitcode.Code` is a growable sequence of bits with `add_bit`,
  `drop_bit` and `copy`.
- `huffpack.compressor.save_tree` and `huffpack.decompressor.read_tree`
  write and read the serialised tree on a binary stream.

## File format

1. The tree, written in pre-order: an internal node is the character `0`
   followed by its left and right subtrees; a leaf is the character `1`
   followed by the byte it stands for.
2. A single newline byte as separator.
3. The codes of the input bytes, packed most significant bit first. The last
   byte is padded with zero bits.

## Limitations

The format stores no length of the original data, so the output is not
always an exact copy of the input:

- Decompression decodes every bit, the zero padding of the last byte
  included, so a few extra copies of the byte whose code is all zeros may
  appear at the end (as in the `abracadabra` example above).
- Input made of a single distinct byte value gets an empty code; it
  compresses to the tree alone and decompresses to empty output.
- Empty input cannot be compressed at all.