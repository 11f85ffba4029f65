"""Huffman codes for the letters of a word."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class HuffmanNode:
    """A tree node; leaves carry a symbol, internal nodes have symbol None."""

    symbol: str | None
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _MinHeap:
    """Binary min-heap of nodes ordered by frequency, ties left as they fall."""

    def __init__(self, nodes: Iterable[HuffmanNode]) -> None:
        self.nodes = list(nodes)
        for index in range((len(self.nodes) - 2) // 2, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self.nodes)

    def _sift_down(self, index: int) -> None:
        nodes = self.nodes
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < len(nodes) and nodes[left].freq < nodes[smallest].freq:
                smallest = left
            if right < len(nodes) and nodes[right].freq < nodes[smallest].freq:
                smallest = right
            if smallest == index:
                return
            nodes[smallest], nodes[index] = nodes[index], nodes[smallest]
            index = smallest

    def pop(self) -> HuffmanNode:
        top = self.nodes[0]
        last = self.nodes.pop()
        if self.nodes:
            self.nodes[0] = last
            self._sift_down(0)
        return top

    def push(self, node: HuffmanNode) -> None:
        nodes = self.nodes
        nodes.append(node)
        index = len(nodes) - 1
        while index and node.freq < nodes[(index - 1) // 2].freq:
            parent = (index - 1) // 2
            nodes[index] = nodes[parent]
            index = parent
        nodes[index] = node


def letter_frequencies(text: str) -> dict[str, int]:
    """Count each character of *text*, lower-cased, in order of first appearance."""
    counts: dict[str, int] = {}
    for char in text:
        letter = char.lower()
        counts[letter] = counts.get(letter, 0) + 1
    return counts


def build_huffman_tree(symbols: Sequence[str], freqs: Sequence[int]) -> HuffmanNode:
    """Build the Huffman tree by repeatedly joining the two least frequent nodes."""
    if len(symbols) != len(freqs):
        raise ValueError("symbols and frequencies differ in length")
    if not symbols:
        raise ValueError("no symbols to encode")
    heap = _MinHeap(HuffmanNode(symbol, freq) for symbol, freq in zip(symbols, freqs))
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(None, left.freq + right.freq, left, right))
    return heap.pop()


def huffman_codes(root: HuffmanNode) -> dict[str, str]:
    """Return each leaf's code (0 for left, 1 for right), leaves taken left to right."""
    codes: dict[str, str] = {}

    def walk(node: HuffmanNode, prefix: str) -> None:
        if node.left is not None:
            walk(node.left, prefix + "0")
        if node.right is not None:
            walk(node.right, prefix + "1")
        if node.is_leaf:
            codes[node.symbol] = prefix

    walk(root, "")
    return codes


def main(argv: Sequence[str] | None = None) -> int:
    """Read a word, print its letter counts and the Huffman code of each letter."""
    parser = argparse.ArgumentParser(
        prog="analgo-huffman", description="Huffman codes for the letters of a word."
    )
    parser.add_argument("word", nargs="?", default=None)
    args = parser.parse_args(argv)

    word = args.word
    if word is None:
        try:
            word = input("Ingrese una palabra: ")
        except EOFError:
            word = ""
    if not word:
        print("No se ingreso ninguna palabra.", file=sys.stderr)
        return 1

    counts = letter_frequencies(word)
    for letter, count in counts.items():
        print(f"Letra: {letter}, Frecuencia: {count}")
    root = build_huffman_tree(list(counts), list(counts.values()))
    for symbol, code in huffman_codes(root).items():
        print(f"{symbol}: {code}")
    return 0