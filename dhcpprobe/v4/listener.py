# SPDX-License-Identifier: MIT

__all__ = ['ListenerState', 'Listener']

import enum
import sys
import threading

from ..error import BindFailure, ReceiveFailure
from .message import Packet
from .printer import render_packet, format_hex


@enum.unique
class ListenerState(enum.Enum):
	IDLE = 'idle'
	RECEIVING = 'receiving'
	DECODING = 'decoding'
	STOPPED = 'stopped'


class Listener:
	"""Background thread printing every datagram the transport receives.

	A packet that cannot be decoded or printed is logged and skipped. A
	receive error stops the thread for good; `state`, `failure` and
	`is_alive()` tell the rest of the program about it.
	"""

	def __init__(self, logger, transport, *, decode=Packet.decode,
		render=render_packet, output=None):
		self.logger = logger
		self.transport = transport
		self.decode = decode
		self.render = render
		self.output = output
		self.state = ListenerState.IDLE
		self.failure = None
		self.running = False
		self.thread = None

	def is_alive(self):
		return self.thread is not None and self.thread.is_alive()

	def write(self, text):
		output = sys.stdout if self.output is None else self.output
		# NOTE: one write per report, so reports from the sending thread
		# can't end up in the middle of this one
		output.write(text + '\n')
		output.flush()

	def handle_datagram(self, data, address):
		host, port = address[:2]
		try:
			packet = self.decode(data)
			report = self.render(packet)
		except Exception as e:
			self.logger.error('could not decode packet from %s:%d [%s] (caused'
				' by %s: %s)', host, port, format_hex(data), type(e).__name__,
				e)
			return False
		self.write('Received packet from %s:%d:\n%s' % (host, port, report))
		return True

	def listen(self):
		try:
			while self.running:
				self.state = ListenerState.RECEIVING
				received = self.transport.recv()
				if received is None:
					continue
				self.state = ListenerState.DECODING
				self.handle_datagram(*received)
				self.state = ListenerState.IDLE
		except ReceiveFailure as e:
			self.failure = e
			self.logger.error('error on listening thread, replies will no'
				' longer be shown (caused by %s)', e)
		finally:
			self.running = False
			self.state = ListenerState.STOPPED

	def start(self):
		if self.running:
			return False
		if not self.transport.can_receive:
			self.failure = BindFailure('transport is not bound')
			self.state = ListenerState.STOPPED
			self.logger.warning('not listening: no socket bound to the DHCP'
				' client port')
			return False
		self.failure = None
		self.running = True
		self.thread = threading.Thread(target=self.listen,
			name='dhcpprobe-listener', daemon=True)
		self.thread.start()
		return True

	def stop(self, timeout=None):
		if self.thread is None:
			return False
		self.running = False
		self.thread.join(timeout)
		return not self.thread.is_alive()

	def join(self, timeout=None):
		if self.thread is not None:
			self.thread.join(timeout)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
