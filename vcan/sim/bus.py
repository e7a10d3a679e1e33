"""
Virtual CAN / CAN-FD bus.

Nodes connect to a bus and get a copy of every message transmitted on it,
except the ones they transmit themselves. Delivery is synchronous: transmit()
returns once every callback has returned.

The bus is simple and not thread safe. It does not simulate transmission
errors, collisions or arbitration, just pure data transfer. Callbacks should
be fast; they may transmit again (e.g. relays), which recurses.
"""
import collections

from vcan.config import MAX_CONNECTED_NODES, MESSAGE_LOG_LEN
from vcan.sim.errors import VcanErr
from vcan.sim.message import Message


class VirtualBus:
    """
    Ordered registry of connected nodes plus transmission bookkeeping.

    Every operation reports its outcome as a VcanErr and never raises on
    misuse; invalid calls leave the bus untouched.
    """
    def __init__(self):
        self.nodes = []
        self.received_msg = Message()
        self.message_log = collections.deque(maxlen=MESSAGE_LOG_LEN)

    @property
    def connected(self):
        """Amount of connected nodes."""
        return len(self.nodes)

    def is_connected(self, node):
        return any(n is node for n in self.nodes)

    def init(self):
        """Drop every node, the last message and the traffic log."""
        self.nodes = []
        self.received_msg = Message()
        self.message_log.clear()
        assert len(self.nodes) <= MAX_CONNECTED_NODES
        return VcanErr.OK

    def connect(self, node):
        """
        Attach a node at the end of the registry.

        Checked in order: NULL_NODE, NULL_CALLBACK, TOO_MANY_CONNECTED,
        ALREADY_CONNECTED. Membership is by identity, not by node id.
        """
        if node is None:
            return VcanErr.NULL_NODE
        if getattr(node, 'callback', None) is None:
            return VcanErr.NULL_CALLBACK
        if len(self.nodes) >= MAX_CONNECTED_NODES:
            return VcanErr.TOO_MANY_CONNECTED
        if self.is_connected(node):
            return VcanErr.ALREADY_CONNECTED
        self.nodes.append(node)
        assert len(self.nodes) <= MAX_CONNECTED_NODES
        return VcanErr.OK

    def disconnect(self, node):
        """Detach a node, keeping the order of the others."""
        if node is None:
            return VcanErr.NULL_NODE
        for i, connected_node in enumerate(self.nodes):
            if connected_node is node:
                del self.nodes[i]
                assert len(self.nodes) <= MAX_CONNECTED_NODES
                return VcanErr.OK
        return VcanErr.NODE_NOT_FOUND

    def transmit(self, msg, source=None):
        """
        Deliver a copy of msg to every connected node except source.

        Nodes are served in registration order. The registry is snapshotted
        first: nodes connected by a callback wait for the next transmission,
        nodes disconnected by a callback are skipped if not yet served.
        A source that is not connected is not an error.
        """
        if msg is None:
            return VcanErr.NULL_MSG

        self.received_msg = msg.copy()
        entry = {
            'id': msg.msg_id,
            'msg': msg.copy(),
            'sender': None if source is None else getattr(source, 'id', None),
            'delivered': 0,
        }
        self.message_log.append(entry)

        for node in list(self.nodes):
            if node is source or not self.is_connected(node):
                continue
            node.callback(node, msg.copy())
            entry['delivered'] += 1
        return VcanErr.OK

    def get_log(self):
        return list(self.message_log)


def init(bus):
    """Initialise (or reset) a bus."""
    if bus is None:
        return VcanErr.NULL_BUS
    return bus.init()


def connect(bus, node):
    """Connect node to bus. See VirtualBus.connect."""
    if bus is None:
        return VcanErr.NULL_BUS
    return bus.connect(node)


def disconnect(bus, node):
    """Disconnect node from bus. See VirtualBus.disconnect."""
    if bus is None:
        return VcanErr.NULL_BUS
    return bus.disconnect(node)


def transmit(bus, msg, source=None):
    """Broadcast msg on bus, skipping source. See VirtualBus.transmit."""
    if bus is None:
        return VcanErr.NULL_BUS
    return bus.transmit(msg, source)
