"""Exceptions raised by the COBS codec."""

ERR_CAPACITY = 0x01


class CobsError(Exception):
    """Base class for codec failures."""

    ERROR_NAMES = {
        ERR_CAPACITY: "output buffer too small",
    }

    def __init__(self, code: int, detail: str = ""):
        name = self.ERROR_NAMES.get(code, f"0x{code:02x}")
        msg = f"{name}: {detail}" if detail else name
        super().__init__(msg)
        self.code = code


class CapacityError(CobsError):
    """Raised when a write would land past the end of the output buffer."""

    def __init__(self, needed: int, capacity: int):
        super().__init__(
            ERR_CAPACITY, f"need at least {needed} bytes, have {capacity}"
        )
        self.needed = needed
        self.capacity = capacity
