from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Sequence, Tuple, Union

from bitrange import BitRange

LEN_SHIFT = 58                     # packed codeword: length in bits 58..63
MAX_CODE_LEN = LEN_SHIFT - 1       # deepest leaf a packed codeword can hold
PAYLOAD_MASK = (1 << LEN_SHIFT) - 1

class EmptyAlphabet(ValueError):
    pass

class LengthMismatch(ValueError):
    pass

class TreeTooDeep(ValueError):
    pass

class UnknownSymbol(KeyError):
    pass

@dataclass(frozen=True)
class Leaf:
    index: int       # alphabet position
    weight: Any

@dataclass(frozen=True)
class Internal:
    left: int        # arena refs
    right: int
    weight: Any

Node = Union[Leaf, Internal]

class Codeword(NamedTuple):
    """
    code: bit d is 1 iff the path takes the right edge at depth d (root first, LSB first)
    length: number of edges from root to leaf
    """
    code: int
    length: int

    def bits(self) -> BitRange:
        return BitRange(self.code, self.length)

    @property
    def packed(self) -> int:
        return (self.length << LEN_SHIFT) | self.code

    @classmethod
    def from_packed(cls, p: int) -> "Codeword":
        return cls(p & PAYLOAD_MASK, p >> LEN_SHIFT)

    def __str__(self):
        return "".join(str(b) for b in self.bits())

class CodeTree:
    """Full binary tree stored in an arena; children are referenced by arena index."""

    def __init__(self, nodes: Sequence[Node], root: int):
        self.nodes: Tuple[Node, ...] = tuple(nodes)
        self.root = root

    def __len__(self):
        return len(self.nodes)

    def node(self, ref: int) -> Node:
        return self.nodes[ref]

    def is_leaf(self, ref: int) -> bool:
        return isinstance(self.nodes[ref], Leaf)

    def leaves(self) -> List[Leaf]:
        return [n for n in self.nodes if isinstance(n, Leaf)]

    def depths(self) -> Dict[int, int]:
        """alphabet index -> leaf depth"""
        out: Dict[int, int] = {}
        stack = [(self.root, 0)]
        while stack:
            ref, depth = stack.pop()
            n = self.nodes[ref]
            if isinstance(n, Leaf):
                out[n.index] = depth
            else:
                stack.append((n.right, depth + 1))
                stack.append((n.left, depth + 1))
        return out

    def weighted_path_length(self):
        # sum(weight * depth) over leaves == sum of internal node weights
        total = 0
        for n in self.nodes:
            if isinstance(n, Internal):
                total = total + n.weight
        return total

def build_tree(weights) -> CodeTree:
    """
    Greedy Huffman merge. The first node popped becomes the left child.
    Equal weights pop in insertion order: leaves in alphabet order, then merged nodes as created.
    """
    nodes: List[Node] = []
    pq = []
    for i, w in enumerate(weights):
        if w < 0:
            raise ValueError(f"weight {i} is negative: {w!r}")
        nodes.append(Leaf(index=i, weight=w))
        pq.append((w, i, i))
    if not nodes:
        raise EmptyAlphabet("cannot build a code for an empty alphabet")
    heapq.heapify(pq)

    order = len(nodes)
    while len(pq) > 1:
        wa, _, a = heapq.heappop(pq)
        wb, _, b = heapq.heappop(pq)
        nodes.append(Internal(left=a, right=b, weight=wa + wb))
        ref = len(nodes) - 1
        heapq.heappush(pq, (wa + wb, order, ref))
        order += 1
    return CodeTree(nodes, pq[0][2])

def _visit(tree: CodeTree, ref: int, depth: int, code: int,
           alphabet, max_len: int, out: Dict[Any, Codeword]):
    if depth > max_len:
        raise TreeTooDeep(f"Huffman tree is too deep: depth {depth} > {max_len}")
    n = tree.nodes[ref]
    if isinstance(n, Leaf):
        out[alphabet[n.index]] = Codeword(code, depth)
        return
    _visit(tree, n.left, depth + 1, code, alphabet, max_len, out)
    _visit(tree, n.right, depth + 1, code | (1 << depth), alphabet, max_len, out)

def build_table(tree: CodeTree, alphabet, max_len: int = MAX_CODE_LEN) -> Dict[Any, Codeword]:
    """
    One depth-first pass: symbol -> Codeword.
    Raises TreeTooDeep if any node sits deeper than max_len.
    """
    if not 0 <= max_len <= MAX_CODE_LEN:
        raise ValueError(f"max_len must be in 0..{MAX_CODE_LEN}")
    table: Dict[Any, Codeword] = {}
    _visit(tree, tree.root, 0, 0, alphabet, max_len, table)
    return table
