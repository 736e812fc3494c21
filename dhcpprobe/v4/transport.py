# SPDX-License-Identifier: MIT

import socket

from ..error import TransportError, BindFailure, ReceiveFailure, SendFailure
from ..packet import encapsulate_datagram
from ..platform_specific import broadcast_socket

DHCP_ADDRESS = '0.0.0.0'
BROADCAST_ADDRESS = '255.255.255.255'

DHCP_SERVER_PORT = 67
DHCP_CLIENT_PORT = 68

# NOTE: largest possible UDP payload, anything longer was truncated
MAX_DATAGRAM = 0x10000


class Transport:
	"""The single UDP endpoint of the probe.

	The listener thread receives on it while the foreground thread sends
	through it. A Python socket allows one thread to sit in `recvfrom()` while
	another calls `sendto()`: each call is one system call on the descriptor
	and the two directions share no state on our side, so sends are not
	queued. Only closing the socket has to wait until the receiver is gone.
	"""

	def __init__(self, logger, *, bind_address=DHCP_ADDRESS,
		bind_port=DHCP_CLIENT_PORT, target_address=BROADCAST_ADDRESS,
		target_port=DHCP_SERVER_PORT, interface=None, timeout=1.0,
		capture=None):
		self.logger = logger
		self.bind_address = bind_address
		self.bind_port = bind_port
		self.target_address = target_address
		self.target_port = target_port
		self.interface = interface
		self.timeout = timeout
		self.capture = capture
		self.sock = None
		self.bound = False

	def __enter__(self):
		self.open()
		return self

	def __exit__(self, *exc_info):
		self.close()

	@property
	def can_receive(self):
		return self.sock is not None and self.bound

	@property
	def address(self):
		if self.sock is None:
			raise TransportError('transport is not open')
		return self.sock.getsockname()

	@property
	def target(self):
		return self.target_address, self.target_port

	def open(self):
		if self.sock is not None:
			return
		try:
			self.sock = broadcast_socket(self.interface)
		except OSError as e:
			raise TransportError('could not create broadcast socket (caused'
				' by %r)' % e) from e
		self.sock.settimeout(self.timeout)

	def bind(self):
		self.open()
		try:
			self.sock.bind((self.bind_address, self.bind_port))
		except OSError as e:
			raise BindFailure('could not bind to %s:%d (caused by %s)'
				% (self.bind_address, self.bind_port, e)) from e
		self.bound = True
		self.logger.info('listening for DHCP replies on %s:%d', *self.address)

	def close(self):
		if self.sock is None:
			return
		self.sock.close()
		self.sock = None
		self.bound = False

	def record(self, source, destination, data):
		if self.capture is None:
			return
		try:
			self.capture.add(encapsulate_datagram(source, destination, data))
		except ValueError as e:
			self.logger.warning('could not capture datagram (caused by %r)', e)

	def send(self, data):
		if self.sock is None:
			raise SendFailure('transport is not open')
		try:
			self.sock.sendto(data, self.target)
		except OSError as e:
			raise SendFailure('could not send to %s:%d (caused by %s)'
				% (*self.target, e)) from e
		self.logger.debug('sent %d bytes to %s:%d', len(data), *self.target)
		self.record(self.address, self.target, data)

	def recv(self):
		"""Wait for one datagram.

		Returns ``(data, address)``, or None when nothing arrived before the
		timeout.
		"""
		if not self.can_receive:
			raise ReceiveFailure('transport is not bound')
		try:
			data, address = self.sock.recvfrom(MAX_DATAGRAM)
		except socket.timeout:
			return None
		except OSError as e:
			raise ReceiveFailure('recvfrom failed (caused by %r)' % e) from e
		if not data:
			raise ReceiveFailure('recvfrom returned 0 bytes from %s:%d'
				% address[:2])
		self.logger.debug('received %d bytes from %s:%d', len(data),
			*address[:2])
		self.record(address[:2], self.address, data)
		return data, address

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
