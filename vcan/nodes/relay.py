"""
Relay node for cascading and bridged bus topologies.
"""
import logging

from vcan.nodes.base_node import BaseNode
from vcan.sim.errors import VcanErr

logger = logging.getLogger(__name__)


class RelayNode(BaseNode):
    """
    Forwards received messages from its bus onto target_bus.

    target_bus defaults to the node's own bus, in which case the forwarded
    copy reaches every other node again. id_map re-tags forwarded messages
    (original ID -> new ID); when forward_ids is given, only those IDs are
    forwarded. Forwarding happens inside the reception callback, so the
    original transmit() does not return before the relayed one has.
    """
    def __init__(self, node_id, bus, target_bus=None, id_map=None, forward_ids=None):
        super().__init__(node_id, bus)
        self.target_bus = bus if target_bus is None else target_bus
        self.id_map = dict(id_map or {})
        self.forward_ids = None if forward_ids is None else set(forward_ids)
        self.forwarded = 0

    def receive_message(self, msg):
        if self.forward_ids is not None and msg.msg_id not in self.forward_ids:
            return

        out = msg.copy()
        out.msg_id = self.id_map.get(msg.msg_id, msg.msg_id)
        err = self.target_bus.transmit(out, source=self)
        if err != VcanErr.OK:
            logger.warning("Relay %s could not forward 0x%X: %s", self.id, msg.msg_id, err.name)
            return
        self.forwarded += 1
        logger.debug("Relay %s forwarded 0x%X as 0x%X", self.id, msg.msg_id, out.msg_id)
