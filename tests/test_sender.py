# SPDX-License-Identifier: MIT

import io
import random

import pytest

from dhcpprobe.error import SendFailure
from dhcpprobe.v4.message import Packet, Option, Operation, Flags
from dhcpprobe.v4.rfc2132 import RFC2132OptionType
from dhcpprobe.v4.sender import Sender


class FakeTransport:
	def __init__(self, failure=None):
		self.sent = []
		self.failure = failure

	def send(self, data):
		if self.failure is not None:
			raise self.failure
		self.sent.append(data)


def test_discover_contents(logger):
	sender = Sender(logger, FakeTransport(), rng=random.Random(1))

	packet = sender.make_discover()
	header = packet.header

	assert header.operation is Operation.REQUEST
	assert header.raw_data['htype'] == 1
	assert header.raw_data['hlen'] == 6
	assert len(header.hardware_address) == 6
	assert header.hops == 0
	assert header.flags == Flags.BROADCAST
	assert packet.options == [
		Option(RFC2132OptionType.DHCP_MESSAGE_TYPE, b'\x01'),
	]


def test_seeded_rng_is_reproducible(logger):
	first = Sender(logger, FakeTransport(), rng=random.Random(42))
	second = Sender(logger, FakeTransport(), rng=random.Random(42))

	assert first.make_discover() == second.make_discover()


def test_fresh_identifiers_every_call(logger):
	sender = Sender(logger, FakeTransport(), rng=random.Random(7))

	first = sender.make_discover().header
	second = sender.make_discover().header

	assert first.transaction_id != second.transaction_id
	assert first.hardware_address != second.hardware_address


def test_identifiers_come_from_rng(logger):
	class FixedRandom:
		def randrange(self, stop):
			return stop - 1

	packet = Sender(logger, FakeTransport(), rng=FixedRandom()).make_discover()

	assert packet.header.transaction_id == 0xFFFFFFFF
	assert packet.header.hardware_address == b'\xFF'*6


def test_send_discover(logger):
	transport = FakeTransport()
	output = io.StringIO()
	sender = Sender(logger, transport, rng=random.Random(3), output=output)

	packet = sender.send_discover()

	assert transport.sent == [packet.encode()]
	assert Packet.decode(transport.sent[0]) == packet
	report = output.getvalue()
	assert report.startswith('Sending packet:\n  op=BOOTREQUEST chaddr=')
	assert 'xid=%08X' % packet.header.transaction_id in report
	assert report.endswith('    dhcpMessageType: discover\n')


def test_send_failure_propagates(logger):
	sender = Sender(logger, FakeTransport(SendFailure('network unreachable')),
		output=io.StringIO())

	with pytest.raises(SendFailure):
		sender.send_discover()

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
