"""
Core Simulation Engine.
"""
import logging

from vcan.sim.bus import VirtualBus

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Owns a bus and a simulation clock, and steps the nodes added to it.
    """
    def __init__(self, time_step=0.01):
        self.dt = time_step
        self.bus = VirtualBus()
        self.nodes = []
        self.time = 0.0
        self.running = False

    def add_node(self, node):
        """Add a node to be stepped. Connecting it to the bus is separate."""
        self.nodes.append(node)
        return node

    def step(self):
        """Advance the simulation by one time step."""
        # Reception already happened synchronously inside transmit().
        for node in list(self.nodes):
            node.step(self.dt)
        self.time += self.dt

    def run(self, duration):
        """Run the simulation for a specific duration in seconds."""
        self.running = True
        steps = int(round(duration / self.dt))
        logger.info("Starting simulation for %ss (%d steps)...", duration, steps)

        for i in range(steps):
            if not self.running:
                logger.info("Simulation stopped after %d steps.", i)
                break
            self.step()
        else:
            logger.info("Simulation complete.")
        self.running = False

    def stop(self):
        self.running = False
