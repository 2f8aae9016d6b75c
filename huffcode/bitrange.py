import numpy as np

DEFAULT_WIDTH = 64  # width assumed for plain Python ints

def _width_of(number) -> int:
    if isinstance(number, np.integer):
        return np.iinfo(number.dtype).bits
    return max(DEFAULT_WIDTH, int(number).bit_length())

def _as_unsigned(number) -> int:
    if isinstance(number, (bool, np.bool_)):
        raise TypeError("bits() needs an integer, not a bool")
    if not isinstance(number, (int, np.integer)):
        raise TypeError(f"bits() needs an integer, got {type(number).__name__}")
    n = int(number)
    if n < 0:
        raise ValueError("bits() needs an unsigned (non-negative) integer")
    return n

class BitRange:
    """
    View of the low `length` bits of an unsigned integer, least significant bit first.
    pop_front/pop_back shrink this view only; iteration never consumes it.
    """
    __slots__ = ("_n", "_len")

    def __init__(self, number, length=None):
        n = _as_unsigned(number)
        if length is None:
            length = _width_of(number)
        length = int(length)
        if length < 0:
            raise ValueError("length must be >= 0")
        self._n = n & ((1 << length) - 1)
        self._len = length

    @property
    def value(self) -> int:
        return self._n

    @property
    def empty(self) -> bool:
        return self._len == 0

    def __len__(self):
        return self._len

    def __bool__(self):
        return self._len > 0

    @property
    def front(self) -> int:
        if self._len == 0:
            raise IndexError("front of empty BitRange")
        return self._n & 1

    @property
    def back(self) -> int:
        if self._len == 0:
            raise IndexError("back of empty BitRange")
        return (self._n >> (self._len - 1)) & 1

    def pop_front(self) -> int:
        b = self.front
        self._n >>= 1
        self._len -= 1
        return b

    def pop_back(self) -> int:
        b = self.back
        self._len -= 1
        self._n &= (1 << self._len) - 1
        return b

    def __getitem__(self, key):
        if isinstance(key, slice):
            i, j, step = key.indices(self._len)
            if step != 1:
                raise ValueError("BitRange slices do not support a step")
            return BitRange(self._n >> i, max(0, j - i))
        i = int(key)
        if i < 0:
            i += self._len
        if not 0 <= i < self._len:
            raise IndexError("BitRange index out of range")
        return (self._n >> i) & 1

    def __iter__(self):
        n = self._n
        for _ in range(self._len):
            yield n & 1
            n >>= 1

    def __reversed__(self):
        for i in range(self._len - 1, -1, -1):
            yield (self._n >> i) & 1

    def copy(self) -> "BitRange":
        return BitRange(self._n, self._len)

    __copy__ = copy

    def __eq__(self, other):
        if not isinstance(other, BitRange):
            return NotImplemented
        return self._len == other._len and self._n == other._n

    def __hash__(self):
        return hash((self._n, self._len))

    def __repr__(self):
        s = "".join(str(b) for b in self)
        return f"BitRange({s!r})"

def bits(number, length=None) -> BitRange:
    """Bits of `number`, lowest first; `length` defaults to the full width of its type."""
    return BitRange(number, length)
