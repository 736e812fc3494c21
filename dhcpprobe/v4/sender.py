# SPDX-License-Identifier: MIT

__all__ = ['Sender']

import random
import sys

from ..hardwaretype import HardwareType, hardware_address_length
from .message import Operation, Flags, Header, Packet, make_option
from .printer import render_packet
from .rfc2132 import RFC2132OptionType, MessageType


class Sender:
	"""Broadcasts DISCOVER packets through a shared transport.

	Nothing is remembered between calls; any reply is only ever seen by the
	listener.
	"""

	def __init__(self, logger, transport, *, rng=None, output=None):
		self.logger = logger
		self.transport = transport
		if rng is None:
			rng = random.Random()
		self.rng = rng
		self.output = output

	def make_discover(self):
		htype = HardwareType.ETH10MB
		hwaddr = bytes(self.rng.randrange(0x100)
			for _ in range(hardware_address_length(htype)))
		header = Header(
			op=Operation.REQUEST,
			htype=htype,
			xid=self.rng.randrange(0x100000000),
			# NOTE: the hardware address is made up, the server can only reach
			# it by broadcast
			flags=Flags.BROADCAST,
			hwaddr=hwaddr,
		)
		return Packet(header, [
			make_option(RFC2132OptionType.DHCP_MESSAGE_TYPE,
				MessageType.DISCOVER),
		])

	def send_discover(self):
		packet = self.make_discover()
		output = sys.stdout if self.output is None else self.output
		output.write('Sending packet:\n%s\n' % render_packet(packet))
		output.flush()
		self.transport.send(packet.encode())
		self.logger.info('sent DISCOVER, xid=%08X', packet.header.transaction_id)
		return packet

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
