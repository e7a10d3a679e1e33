"""
Result codes returned by the bus operations.
"""
import enum


class VcanErr(enum.IntEnum):
    """VCAN result codes. Values are stable."""
    OK = 0
    NULL_BUS = 1
    NULL_MSG = 2
    NULL_NODE = 3
    NULL_CALLBACK = 4
    # Increase MAX_CONNECTED_NODES if this shows up in practice.
    TOO_MANY_CONNECTED = 5
    NODE_NOT_FOUND = 6
    ALREADY_CONNECTED = 7


class VcanError(Exception):
    """Raised by helpers that turn a non-OK result into an exception."""
    def __init__(self, err, message=None):
        self.err = VcanErr(err)
        super().__init__(message or f"VCAN operation failed: {self.err.name}")


def check(err, context=None):
    """Raise VcanError unless err is OK. Returns err for chaining."""
    if err != VcanErr.OK:
        message = f"{context}: {VcanErr(err).name}" if context else None
        raise VcanError(err, message)
    return err
