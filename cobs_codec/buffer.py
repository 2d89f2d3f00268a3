"""Capacity-checked view over a caller-owned output buffer."""

import logging

from .errors import CapacityError

log = logging.getLogger(__name__)


def byte_view(data) -> memoryview:
    """Return a flat unsigned-byte view of a bytes-like object."""
    if isinstance(data, str):
        raise TypeError("str must be encoded to bytes first")
    mv = memoryview(data)
    if mv.ndim > 1 or mv.itemsize > 1:
        raise BufferError("object must be a single-dimension buffer of bytes")
    if mv.format != "B":
        mv = mv.cast("B")
    return mv


class OutputBuffer:
    """Writable byte buffer with a write cursor and a hard capacity.

    The wrapped object is never grown: every write is checked against its
    length and raises :class:`CapacityError` instead of running off the end.

    Args:
        out: Writable bytes-like object (``bytearray``, writable
             ``memoryview``, ``array('B')``).
    """

    __slots__ = ("_view", "_pos")

    def __init__(self, out):
        view = byte_view(out)
        if view.readonly:
            raise TypeError("output buffer must be writable")
        self._view = view
        self._pos = 0

    # ---- state ----

    @property
    def capacity(self) -> int:
        return len(self._view)

    @property
    def position(self) -> int:
        """Number of bytes written (or reserved) so far."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    # ---- writes ----

    def append(self, value: int) -> None:
        """Write one byte at the cursor and advance it."""
        pos = self._pos
        if pos >= len(self._view):
            self._overflow(pos + 1)
        self._view[pos] = value
        self._pos = pos + 1

    def reserve(self) -> int:
        """Skip one byte to be filled in later; return its index."""
        pos = self._pos
        if pos >= len(self._view):
            self._overflow(pos + 1)
        self._pos = pos + 1
        return pos

    def put(self, index: int, value: int) -> None:
        """Fill a byte previously passed over by :meth:`reserve`."""
        if not 0 <= index < self._pos:
            raise IndexError(f"index {index} was not reserved")
        self._view[index] = value

    def _overflow(self, needed: int) -> None:
        log.debug("output overflow: need %d, capacity %d", needed, len(self._view))
        raise CapacityError(needed, len(self._view))

    # ---- lifetime ----

    def release(self) -> None:
        """Release the underlying view so the caller may resize its buffer."""
        self._view.release()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.release()

    def __repr__(self) -> str:
        return f"OutputBuffer(position={self._pos}, capacity={len(self._view)})"
