import numpy as np

def pack_bits(bit_iter):
    """
    Pack an iterable of 0/1 into bytes (MSB-first), zero-padding the last byte.
    Returns (data, nbits).
    """
    b = np.fromiter((int(v) for v in bit_iter), dtype=np.uint8)
    if b.size and b.max() > 1:
        raise ValueError("pack_bits expects only 0/1 values")
    return np.packbits(b).tobytes(), int(b.size)

def unpack_bits(data: bytes, nbits=None):
    """
    Yield the bits of data (MSB-first), stopping after nbits if given.
    """
    arr = np.unpackbits(np.frombuffer(data, dtype=np.uint8))
    if nbits is not None:
        if nbits > arr.size:
            raise ValueError(f"nbits={nbits} exceeds the {arr.size} bits available")
        arr = arr[:nbits]
    for v in arr:
        yield int(v)

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.total = 0

    def write_bit(self, bit: int):
        self._cur = (self._cur << 1) | (1 if bit else 0)
        self._nbits += 1
        self.total += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code, lowest bit first (codeword order)."""
        for i in range(length):
            self.write_bit((code >> i) & 1)

    def write_bits(self, bit_iter):
        for b in bit_iter:
            self.write_bit(b)

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: bytes, nbits=None):
        self.data = data
        self.nbits = len(data) * 8 if nbits is None else nbits
        if self.nbits > len(data) * 8:
            raise ValueError("nbits exceeds the data length")
        self.pos = 0

    def read_bit(self) -> int:
        if self.pos >= self.nbits:
            raise EOFError("Unexpected end of bitstream")
        i, bit = divmod(self.pos, 8)
        self.pos += 1
        return (self.data[i] >> (7 - bit)) & 1

    def __iter__(self):
        while self.pos < self.nbits:
            yield self.read_bit()
