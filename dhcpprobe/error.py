# SPDX-License-Identifier: MIT

__all__ = ['Error', 'DHCPv4Error', 'DecodeError', 'TruncatedHeader',
	'MissingMagicCookie', 'TruncatedStream', 'BadOptionLength', 'EncodeError',
	'OptionTooLong', 'TransportError', 'BindFailure', 'ReceiveFailure',
	'SendFailure']

import enum


class Error(Exception):
	"""Base class for dhcpprobe errors"""
	pass


class DHCPv4Error(Error):
	"""Base class for DHCPv4 errors"""
	pass


class DecodeError(DHCPv4Error):
	"""Raised when bytes received from the wire are not a DHCP packet"""
	pass


class TruncatedHeader(DecodeError):
	pass


class MissingMagicCookie(DecodeError):
	pass


class TruncatedStream(DecodeError):
	pass


class BadOptionLength(DecodeError):
	"""Option data length does not match what its type requires.

	Decoders raise it with ``option`` unset; the codec registry fills it in,
	since a decoder only ever sees the option data.
	"""

	def __init__(self, length, expected, option=None):
		self.length = length
		self.expected = expected
		self.option = option
		super().__init__(length, expected, option)

	def __str__(self):
		if self.option is None:
			subject = 'option'
		elif not isinstance(self.option, enum.Enum):
			subject = 'option %d' % self.option
		else:
			subject = 'option %s (%d)' % (self.option, self.option)
		return 'bad %s data length %d, expected %s' % (subject, self.length,
			self.expected)


class EncodeError(DHCPv4Error):
	"""Raised when a packet cannot be serialized as given"""
	pass


class OptionTooLong(EncodeError):
	pass


class TransportError(Error):
	"""Base class for socket errors"""
	pass


class BindFailure(TransportError):
	pass


class ReceiveFailure(TransportError):
	pass


class SendFailure(TransportError):
	pass

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
