"""Huffman coding of text, with a compact binary container format.

The container holds a big-endian header followed by the packed code bits:

* ``u16`` number of distinct characters,
* ``u32`` number of meaningful code bits,
* for each distinct character, its code point (``u32``) and frequency (``u32``),
* the code bits, most significant bit first, zero-padded to a whole byte.
"""

from __future__ import annotations

import argparse
import heapq
import struct
from collections import Counter
from dataclasses import dataclass
from itertools import count
from typing import Dict, List, Mapping, Optional, Union

_HEADER = struct.Struct(">HI")
_ENTRY = struct.Struct(">II")


@dataclass(frozen=True)
class Leaf:
    """A single character with its frequency."""

    char: str
    freq: int

    @property
    def first_char(self) -> str:
        return self.char


@dataclass(frozen=True)
class Node:
    """An internal node joining two subtrees."""

    freq: int
    left: "HuffmanTree"
    right: "HuffmanTree"

    @property
    def first_char(self) -> str:
        """The character of the leftmost leaf, used to break frequency ties."""
        return self.left.first_char


HuffmanTree = Union[Leaf, Node]


def build_frequency_table(text: str) -> Dict[str, int]:
    """Count how often each character occurs, in order of first appearance."""
    return dict(Counter(text))


def build_huffman_tree(freq: Mapping[str, int]) -> HuffmanTree:
    """Build the Huffman tree, merging lowest frequencies first.

    Ties on frequency are broken by the smaller leftmost character.
    Raises ValueError for an empty table.
    """
    if not freq:
        raise ValueError("cannot build a Huffman tree from an empty frequency table")
    tiebreak = count()
    heap = [(f, c, next(tiebreak), Leaf(c, f)) for c, f in freq.items()]
    heapq.heapify(heap)
    while len(heap) > 1:
        *_, first = heapq.heappop(heap)
        *_, second = heapq.heappop(heap)
        node = Node(first.freq + second.freq, first, second)
        heapq.heappush(heap, (node.freq, node.first_char, next(tiebreak), node))
    return heap[0][3]


def build_codes(tree: HuffmanTree) -> Dict[str, str]:
    """Map each character to its code: '0' for left branches, '1' for right."""
    codes: Dict[str, str] = {}
    stack = [(tree, "")]
    while stack:
        node, prefix = stack.pop()
        if isinstance(node, Leaf):
            codes[node.char] = prefix
        else:
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))
    return codes


def encode(text: str, codes: Mapping[str, str]) -> str:
    """Concatenate the codes of the characters of ``text``."""
    try:
        return "".join(codes[c] for c in text)
    except KeyError as exc:
        raise ValueError(f"no code for character {exc.args[0]!r}") from None


def decode(bits: str, tree: HuffmanTree) -> str:
    """Decode a string of bit characters by walking ``tree``.

    Any character other than '0' selects the right branch. A tree made of a
    single leaf decodes an empty bit string to that character once.
    """
    result: List[str] = []
    node = tree

    def step(current: HuffmanTree, bit: str) -> HuffmanTree:
        if isinstance(current, Leaf):
            raise ValueError("cannot follow a bit from a leaf root")
        return current.left if bit == "0" else current.right

    for bit in bits:
        if isinstance(node, Leaf):
            result.append(node.char)
            node = step(tree, bit)
        else:
            node = step(node, bit)
    if isinstance(node, Leaf):
        result.append(node.char)
    return "".join(result)


def bits_to_bytes(bits: str) -> bytes:
    """Pack a string of bit characters into bytes, MSB first, zero-padded."""
    out = bytearray()
    for start in range(0, len(bits), 8):
        byte = 0
        for offset, bit in enumerate(bits[start : start + 8]):
            if bit == "1":
                byte |= 1 << (7 - offset)
        out.append(byte)
    return bytes(out)


def bytes_to_bits(data: bytes) -> str:
    """Unpack bytes into a string of '0' and '1' characters, MSB first."""
    return "".join(f"{byte:08b}" for byte in data)


def compress_text(text: str) -> bytes:
    """Compress ``text`` into the Huffman container format."""
    freq_table = build_frequency_table(text)
    tree = build_huffman_tree(freq_table)
    encoded = encode(text, build_codes(tree))
    if len(freq_table) > 0xFFFF:
        raise ValueError("too many distinct characters for the container format")
    if len(encoded) > 0xFFFFFFFF:
        raise ValueError("encoded text too long for the container format")
    parts = [_HEADER.pack(len(freq_table), len(encoded))]
    parts.extend(_ENTRY.pack(ord(c), f) for c, f in freq_table.items())
    parts.append(bits_to_bytes(encoded))
    return b"".join(parts)


def decompress_data(data: bytes) -> str:
    """Decompress a Huffman container back into text.

    Raises ValueError if the data is truncated or malformed.
    """
    try:
        n, t = _HEADER.unpack_from(data, 0)
    except struct.error:
        raise ValueError("truncated header") from None
    offset = _HEADER.size
    freq_table: Dict[str, int] = {}
    for _ in range(n):
        try:
            code_point, f = _ENTRY.unpack_from(data, offset)
        except struct.error:
            raise ValueError("truncated frequency table") from None
        offset += _ENTRY.size
        try:
            char = chr(code_point)
        except (ValueError, OverflowError):
            raise ValueError(f"invalid code point {code_point}") from None
        if 0xD800 <= code_point <= 0xDFFF:
            raise ValueError(f"invalid code point {code_point}")
        freq_table[char] = f
    bits = bytes_to_bits(data[offset:])
    if t > len(bits):
        raise ValueError("bit count exceeds the encoded data")
    tree = build_huffman_tree(freq_table)
    return decode(bits[:t], tree)


def compress(input_path: str, output_path: str) -> None:
    """Compress a UTF-8 text file into a Huffman container file."""
    with open(input_path, encoding="utf-8") as source:
        text = source.read()
    with open(output_path, "wb") as target:
        target.write(compress_text(text))


def decompress(input_path: str, output_path: str) -> None:
    """Decompress a Huffman container file into a UTF-8 text file."""
    with open(input_path, "rb") as source:
        data = source.read()
    with open(output_path, "wb") as target:
        target.write(decompress_data(data).encode("utf-8"))


def main(argv: Optional[List[str]] = None) -> int:
    """Compress a text file and decompress the result again."""
    parser = argparse.ArgumentParser(description="Huffman compress and decompress.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("compressed", nargs="?", default="file.bin")
    parser.add_argument("output", nargs="?", default="out.txt")
    args = parser.parse_args(argv)
    compress(args.input, args.compressed)
    decompress(args.compressed, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())