import logging

from vcan.sim.errors import VcanErr, check
from vcan.sim.node import Node

logger = logging.getLogger(__name__)


def _deliver(node, msg):
    node.receive_message(msg)


class BaseNode(Node):
    """
    Node that connects itself to a bus on creation.

    Subclasses override receive_message() to react to traffic and step() to
    run periodic logic under a SimulationEngine.
    """
    def __init__(self, node_id, bus, custom_data=None):
        super().__init__(callback=_deliver, node_id=node_id, custom_data=custom_data)
        self.bus = bus
        check(self.bus.connect(self), f"Connecting node {node_id}")

    def send_message(self, msg):
        """Transmits on the bus; this node does not receive its own message."""
        err = self.bus.transmit(msg, source=self)
        if err != VcanErr.OK:
            logger.warning("Node %s failed to transmit: %s", self.id, err.name)
        return err

    def receive_message(self, msg):
        """Callback for receiving messages. Override in subclasses."""
        pass

    def step(self, dt):
        """Execute one time step of logic. Override in subclasses."""
        pass

    def detach(self):
        """Disconnect from the bus. The node stops receiving immediately."""
        return self.bus.disconnect(self)
