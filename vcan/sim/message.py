"""
CAN / CAN-FD message record.
"""
from dataclasses import dataclass, field

from vcan.config import DATA_MAX_LEN


@dataclass
class Message:
    """
    Message to transmit or receive.

    msg_id is the CAN ID and is not used by the bus. length is the number of
    valid bytes at the start of data. data is always DATA_MAX_LEN bytes long;
    shorter payloads are zero padded.
    """
    msg_id: int = 0
    length: int = 0
    data: bytearray = field(default_factory=lambda: bytearray(DATA_MAX_LEN))

    def __post_init__(self):
        data = bytearray(self.data)
        if len(data) > DATA_MAX_LEN:
            raise ValueError(f"Payload of {len(data)} bytes exceeds {DATA_MAX_LEN} bytes")
        if not 0 <= self.length <= DATA_MAX_LEN:
            raise ValueError(f"Length {self.length} outside 0..{DATA_MAX_LEN}")
        data.extend(bytes(DATA_MAX_LEN - len(data)))
        self.data = data

    @classmethod
    def from_payload(cls, msg_id, payload):
        """Build a message whose length matches the payload."""
        payload = bytes(payload)
        return cls(msg_id=msg_id, length=len(payload), data=payload)

    @property
    def payload(self):
        """The valid prefix of the data buffer."""
        return bytes(self.data[:self.length])

    def copy(self):
        return Message(msg_id=self.msg_id, length=self.length, data=bytearray(self.data))

    def __str__(self):
        data = "".join(f"{b:02X} " for b in self.data[:self.length])
        return f"ID: 0x{self.msg_id:08X} | Len: {self.length} | Data: {data}"
