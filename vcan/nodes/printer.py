from vcan.nodes.base_node import BaseNode


class PrinterNode(BaseNode):
    """Prints every received message to stdout."""
    def receive_message(self, msg):
        print(f"Node {self.id} received {msg}")
