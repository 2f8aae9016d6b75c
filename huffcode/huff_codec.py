from __future__ import annotations
import argparse
from collections.abc import Hashable, Iterable
from types import MappingProxyType
from typing import Iterator

import numpy as np
from huff_tree import (
    MAX_CODE_LEN, Codeword, Leaf, LengthMismatch, UnknownSymbol,
    build_table, build_tree,
)

class Encoding:
    """
    Huffman code over a weighted alphabet. Immutable once built; encode/decode
    calls keep their own cursor state, so one instance can serve many callers.

        >>> enc = Encoding([22, 12, 29, 6, 21, 9], "abcdef")
        >>> str(enc.codeword("d"))
        '1010'
        >>> "".join(enc.decode(enc.encode("fade")))
        'fade'
    """

    def __init__(self, weights, alphabet, *, max_len: int = MAX_CODE_LEN):
        weights = list(weights)
        alphabet = tuple(alphabet)
        if len(weights) != len(alphabet):
            raise LengthMismatch(
                f"weights and alphabet must have the same length ({len(weights)} != {len(alphabet)})")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet symbols must be distinct")

        self.alphabet = alphabet
        self.tree = build_tree(weights)
        self.table = MappingProxyType(build_table(self.tree, alphabet, max_len))

    def __len__(self):
        return len(self.alphabet)

    def __contains__(self, symbol):
        if not isinstance(symbol, Hashable):
            return False
        try:
            return symbol in self.table
        except TypeError:  # e.g. a tuple holding a list
            return False

    def codeword(self, symbol) -> Codeword:
        try:
            return self.table[symbol]
        except (KeyError, TypeError):
            raise UnknownSymbol(symbol) from None

    def code_lengths(self) -> np.ndarray:
        """Codeword lengths aligned with the alphabet."""
        return np.array([self.table[s].length for s in self.alphabet], dtype=np.int64)

    def weighted_path_length(self):
        return self.tree.weighted_path_length()

    # ---- encoder ----

    def encode(self, x):
        """
        Symbol -> BitRange of its codeword.
        Iterable of symbols -> lazy iterator of bits (see iter_bits).
        """
        if x in self:
            return self.table[x].bits()
        if isinstance(x, str) and len(x) == 1:
            raise UnknownSymbol(x)
        if isinstance(x, Iterable):
            return self.iter_bits(x)
        raise UnknownSymbol(x)

    def iter_bits(self, symbols) -> Iterator[int]:
        # next symbol is pulled only after the current codeword is used up
        for s in symbols:
            yield from self.codeword(s).bits()

    # ---- decoder ----

    def decode(self, bits) -> Iterator:
        """
        Lazy tree walk: 0 -> left, 1 -> right, emit at each leaf and restart at the root.
        A trailing partial codeword is dropped. With a single-symbol alphabet the
        sole symbol repeats forever without reading input; bound it with islice.
        """
        nodes = self.tree.nodes
        root = nodes[self.tree.root]
        alphabet = self.alphabet

        if isinstance(root, Leaf):
            sym = alphabet[root.index]
            while True:
                yield sym

        cur = root
        for b in bits:
            if b == 0:
                cur = nodes[cur.left]
            elif b == 1:
                cur = nodes[cur.right]
            else:
                raise ValueError(f"bit must be 0 or 1, got {b!r}")
            if isinstance(cur, Leaf):
                yield alphabet[cur.index]
                cur = root

def build(weights, alphabet, *, max_len: int = MAX_CODE_LEN) -> Encoding:
    return Encoding(weights, alphabet, max_len=max_len)

def main():
    ap = argparse.ArgumentParser(description="Print a Huffman code table and round-trip a text through it.")
    ap.add_argument("--weights", default="22,12,29,6,21,9", help="comma separated weights")
    ap.add_argument("--alphabet", default="abcdef", help="one character per symbol")
    ap.add_argument("--text", default="ebbaaeaafc")
    args = ap.parse_args()

    weights = [int(w) for w in args.weights.split(",")]
    enc = build(weights, args.alphabet)
    for sym, w in zip(enc.alphabet, weights):
        cw = enc.codeword(sym)
        print(f"[huff_codec] {sym!r} w={w} len={cw.length} code={cw}")
    print(f"[huff_codec] weighted path length = {enc.weighted_path_length()}")

    stream = list(enc.encode(args.text))
    back = "".join(enc.decode(stream))
    print(f"[huff_codec] {args.text!r} -> {''.join(map(str, stream))} ({len(stream)} bits)")
    print(f"[huff_codec] decoded {back!r}, round trip {'ok' if back == args.text else 'FAILED'}")

if __name__ == "__main__":
    main()
