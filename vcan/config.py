"""
Bus constants and tunables.

The payload and node capacities are fixed for the lifetime of the process.
Only the bookkeeping knobs (traffic log size, report directory) can be
overridden from the environment, once, at import time.
"""
import logging
import os

logger = logging.getLogger(__name__)

# Max payload size of a CAN-FD frame in bytes.
DATA_MAX_LEN = 64
# Max amount of virtual nodes connected to a single bus.
MAX_CONNECTED_NODES = 16


def _env_int(name, default, minimum=0):
    """Integer from the environment; invalid values fall back to default."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, value, default)
        return default
    if number < minimum:
        logger.warning("Ignoring %s=%d: below %d, using %d", name, number, minimum, default)
        return default
    return number


MESSAGE_LOG_LEN = _env_int('VCAN_MESSAGE_LOG_LEN', 1000)
REPORT_DIR = os.environ.get('VCAN_REPORT_DIR', 'reports')
