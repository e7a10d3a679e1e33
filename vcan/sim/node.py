"""
Virtual node record.
"""


class Node:
    """
    Virtual node.

    callback is invoked as callback(node, msg) whenever a message is delivered,
    receiving this very node and its own copy of the message. It is read at
    delivery time, so it can be swapped while the node is connected.
    node_id can be set to anything, the bus does not use it.
    custom_data is any data the callback may need. Can be None.
    """
    def __init__(self, callback=None, node_id=0, custom_data=None):
        self.callback = callback
        self.id = node_id
        self.custom_data = custom_data

    def __repr__(self):
        return f"{type(self).__name__}(id={self.id!r})"
