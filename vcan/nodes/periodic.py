from vcan.nodes.base_node import BaseNode


class PeriodicNode(BaseNode):
    """
    Transmits a fixed message every `period` seconds of simulated time.
    Drive it with SimulationEngine.step().
    """
    def __init__(self, node_id, bus, msg, period=0.1):
        super().__init__(node_id, bus)
        self.msg = msg
        self.period = period
        self.time_since_last_tx = 0.0
        self.tx_count = 0

    def step(self, dt):
        self.time_since_last_tx += dt
        # Tolerate float drift from accumulating dt.
        if self.time_since_last_tx + 1e-9 >= self.period:
            self.send_message(self.msg)
            self.tx_count += 1
            self.time_since_last_tx -= self.period
