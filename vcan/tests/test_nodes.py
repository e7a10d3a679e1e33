"""
Test Suite for the ready-made nodes.
"""
import pytest
from vcan.nodes.base_node import BaseNode
from vcan.nodes.printer import PrinterNode
from vcan.nodes.recorder import RecorderNode
from vcan.nodes.relay import RelayNode
from vcan.sim.bus import VirtualBus
from vcan.sim.errors import VcanErr, VcanError, check
from vcan.sim.message import Message


class CountingNode(BaseNode):
    def __init__(self, node_id, bus):
        super().__init__(node_id, bus)
        self.count = 0

    def receive_message(self, msg):
        self.count += 1


@pytest.fixture
def bus():
    return VirtualBus()


class TestBaseNode:
    def test_connects_on_creation(self, bus):
        node = BaseNode('ECU', bus)

        assert bus.nodes == [node]

    def test_send_skips_self(self, bus):
        sender = CountingNode('TX', bus)
        receiver = CountingNode('RX', bus)

        assert sender.send_message(Message.from_payload(0x100, b'\x01')) == VcanErr.OK
        assert sender.count == 0
        assert receiver.count == 1
        assert bus.get_log()[0]['sender'] == 'TX'

    def test_send_none_reports_error(self, bus):
        node = BaseNode('ECU', bus)

        assert node.send_message(None) == VcanErr.NULL_MSG

    def test_detach(self, bus):
        node = CountingNode('ECU', bus)

        assert node.detach() == VcanErr.OK
        bus.transmit(Message())
        assert node.count == 0
        assert node.detach() == VcanErr.NODE_NOT_FOUND

    def test_connect_failure_raises(self, bus, monkeypatch):
        monkeypatch.setattr('vcan.sim.bus.MAX_CONNECTED_NODES', 1)
        BaseNode('first', bus)

        with pytest.raises(VcanError) as excinfo:
            BaseNode('second', bus)

        assert excinfo.value.err == VcanErr.TOO_MANY_CONNECTED
        assert 'second' in str(excinfo.value)
        assert bus.connected == 1


class TestErrors:
    def test_check_ok(self):
        assert check(VcanErr.OK) == VcanErr.OK

    def test_check_raises_with_code(self):
        with pytest.raises(VcanError) as excinfo:
            check(VcanErr.NODE_NOT_FOUND)

        assert excinfo.value.err == VcanErr.NODE_NOT_FOUND
        assert 'NODE_NOT_FOUND' in str(excinfo.value)

    def test_codes_are_stable(self):
        assert [int(e) for e in VcanErr] == list(range(8))


class TestRecorderNode:
    def test_records_copies(self, bus):
        recorder = RecorderNode('REC', bus)
        msg = Message.from_payload(0x10, b'\xAA')

        bus.transmit(msg)
        msg.data[0] = 0x00

        assert recorder.last.payload == b'\xAA'

    def test_id_filter(self, bus):
        recorder = RecorderNode('REC', bus, accept_ids=[0x20])

        bus.transmit(Message(msg_id=0x10))
        bus.transmit(Message(msg_id=0x20))

        assert [m.msg_id for m in recorder.received] == [0x20]

    def test_clear(self, bus):
        recorder = RecorderNode('REC', bus)
        bus.transmit(Message())
        recorder.clear()

        assert recorder.received == []
        assert recorder.last is None


class TestPrinterNode:
    def test_prints_reception(self, bus, capsys):
        PrinterNode(2, bus)

        bus.transmit(Message(msg_id=0xABCD, length=3, data=[0x00, 0x1A, 0x2B]))

        out = capsys.readouterr().out
        assert out == "Node 2 received ID: 0x0000ABCD | Len: 3 | Data: 00 1A 2B \n"


class TestRelayNode:
    def test_bridges_two_buses(self, bus):
        other_bus = VirtualBus()
        RelayNode('GW', bus, target_bus=other_bus, id_map={0x100: 0x200})
        far = RecorderNode('FAR', other_bus)
        near = RecorderNode('NEAR', bus)

        bus.transmit(Message.from_payload(0x100, b'\x01\x02'))

        assert far.last == Message.from_payload(0x200, b'\x01\x02')
        assert near.last.msg_id == 0x100
        assert other_bus.get_log()[0]['sender'] == 'GW'

    def test_forward_filter(self, bus):
        other_bus = VirtualBus()
        relay = RelayNode('GW', bus, target_bus=other_bus, forward_ids=[0x1])
        far = RecorderNode('FAR', other_bus)

        bus.transmit(Message(msg_id=0x1))
        bus.transmit(Message(msg_id=0x2))

        assert [m.msg_id for m in far.received] == [0x1]
        assert relay.forwarded == 1

    def test_same_bus_relay_is_nested(self, bus):
        recorder = RecorderNode('REC', bus)
        relay = RelayNode('RELAY', bus, id_map={0x1: 0x2}, forward_ids=[0x1])

        bus.transmit(Message(msg_id=0x1))

        # The relayed frame arrives while the original transmission is still running.
        assert [m.msg_id for m in recorder.received] == [0x1, 0x2]
        assert relay.forwarded == 1

    def test_cascade(self):
        buses = [VirtualBus() for _ in range(3)]
        RelayNode('R01', buses[0], target_bus=buses[1])
        RelayNode('R12', buses[1], target_bus=buses[2])
        end = RecorderNode('END', buses[2])

        buses[0].transmit(Message.from_payload(0x42, b'\x42'))

        assert end.last.payload == b'\x42'
