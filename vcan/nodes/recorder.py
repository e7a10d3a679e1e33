"""
Recorder node, the usual probe in unit tests.
"""
from vcan.nodes.base_node import BaseNode


class RecorderNode(BaseNode):
    """
    Keeps a copy of every received message.

    accept_ids restricts recording to the given CAN IDs; None records all.
    """
    def __init__(self, node_id, bus, accept_ids=None):
        super().__init__(node_id, bus)
        self.accept_ids = None if accept_ids is None else set(accept_ids)
        self.received = []

    def receive_message(self, msg):
        if self.accept_ids is None or msg.msg_id in self.accept_ids:
            self.received.append(msg)

    @property
    def last(self):
        return self.received[-1] if self.received else None

    def clear(self):
        self.received = []
