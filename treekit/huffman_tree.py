"""Huffman code construction, encoding and decoding."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Mapping


@dataclass
class _Node:
    frequency: int
    character: str = "\0"
    left: _Node | None = None
    right: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _remove_min(nodes: list[_Node]) -> _Node:
    index = min(range(len(nodes)), key=lambda i: nodes[i].frequency)
    return nodes.pop(index)


class HuffmanTree:
    """A Huffman tree built from a mapping of characters to frequencies."""

    def __init__(self, frequencies: Mapping[str, int]) -> None:
        nodes = [_Node(freq, char) for char, freq in frequencies.items()]
        while len(nodes) > 1:
            smallest = _remove_min(nodes)
            next_smallest = _remove_min(nodes)
            nodes.append(
                _Node(
                    smallest.frequency + next_smallest.frequency,
                    left=smallest,
                    right=next_smallest,
                )
            )
        self._root: _Node | None = nodes[0] if nodes else None

    def encoding_map(self) -> dict[str, str]:
        """Return the bit string assigned to each character."""
        codes: dict[str, str] = {}
        if self._root is None:
            return codes
        stack: list[tuple[_Node, str]] = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf:
                codes[node.character] = prefix
                continue
            if node.right is not None:
                stack.append((node.right, prefix + "1"))
            if node.left is not None:
                stack.append((node.left, prefix + "0"))
        return codes

    def decode(self, bits: str) -> str:
        """Decode a string of bits; any character other than ``0`` counts as ``1``.

        Bits left over after the last complete code are ignored.
        """
        if self._root is None:
            raise ValueError("cannot decode with an empty Huffman tree")
        result: list[str] = []
        node = self._root
        for bit in bits:
            node = node.left if bit == "0" else node.right
            if node is None:
                raise ValueError("bit string does not follow the Huffman tree")
            if node.is_leaf:
                result.append(node.character)
                node = self._root
        return "".join(result)


def encode(text: str, encoding_map: Mapping[str, str]) -> str:
    """Encode ``text`` with ``encoding_map``; unknown characters raise KeyError."""
    return "".join(encoding_map[char] for char in text)


_HAWAIIAN_FREQUENCIES = {
    "A": 2089,
    "E": 576,
    "H": 357,
    "I": 671,
    "K": 849,
    "L": 354,
    "M": 259,
    "N": 660,
    "O": 844,
    "P": 239,
    "U": 472,
    "W": 74,
    "'": 541,
}


def main(argv: list[str] | None = None) -> int:
    """Encode and decode a sample message with Hawaiian letter frequencies."""
    tree = HuffmanTree(_HAWAIIAN_FREQUENCIES)
    encoded = encode("ALOHA", tree.encoding_map())
    print(f"Encoded: {encoded}")
    print(f"Decoded: {tree.decode(encoded)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())