# SPDX-License-Identifier: MIT

__all__ = ['Operation', 'HardwareType', 'Flags', 'MessageType', 'Option',
	'Header', 'Packet', 'HEADER_SIZE', 'DHCP_MAGIC_COOKIE', 'PAD', 'END',
	'make_option', 'encode_options', 'decode_options']

import enum
import struct
from collections import namedtuple
from ipaddress import IPv4Address

from ..hardwaretype import HardwareType
# NOTE: the rfc2132 import also registers the option types and codecs, so
# don't remove it
from .rfc2132 import RFC2132OptionType, MessageType
from .optiontypes import get as get_option
from .option_codecs import encode as encode_option
from ..error import (DHCPv4Error, TruncatedHeader, MissingMagicCookie,
	TruncatedStream, EncodeError, OptionTooLong)


@enum.unique
class Operation(enum.IntEnum):
	REQUEST = 1
	REPLY = 2

	def __str__(self):
		return 'BOOT%s' % self.name


@enum.unique
class Flags(enum.IntFlag):
	BROADCAST = 1 << 15


HEADER_SIZE = 236
DHCP_MAGIC_COOKIE = b'\x63\x82\x53\x63'
PAD = RFC2132OptionType.PAD
END = RFC2132OptionType.END

Option = namedtuple('Option', 'type data')


def make_option(option, value):
	"""Build an option from a decoded value, e.g. ``MessageType.DISCOVER``."""
	return Option(get_option(option, ignore_unknown=True),
		bytes(encode_option(option, value)))


class Header:
	"""The fixed part of a DHCP packet, as on the wire.

	Field values are kept exactly as they were decoded, so a header read from
	the network always encodes back to the same bytes, even when its values
	make no sense (an unknown ``op``, ``hlen`` larger than ``chaddr``, ...).
	Setters are strict and only used to build packets.
	"""

	NAMES = namedtuple('Fields', 'op htype hlen hops xid secs flags ciaddr'
		' yiaddr siaddr giaddr chaddr sname file', defaults=(None,)*14)
	CODEC = struct.Struct(
		'!'			# network byte order (big), no alignment
		'BBBB'		# op, htype, hlen, hops
		'I'			# xid
		'HH'		# secs, flags
		'4s'		# ciaddr (client ip)
		'4s'		# yiaddr (given ip by server)
		'4s'		# siaddr (server ip address)
		'4s'		# giaddr (gateway ip address)
		'16s'		# chaddr (client hardware address)
		'64s'		# server host name (null-terminated)
		'128s'		# boot file name (null-terminated)
	)

	@property
	def operation(self):
		try:
			return Operation(self.raw_data['op'])
		except ValueError:
			return self.raw_data['op']

	@operation.setter
	def operation(self, value):
		self.raw_data['op'] = Operation(value).value

	@property
	def hardware_type(self):
		try:
			return HardwareType(self.raw_data['htype'])
		except ValueError:
			return self.raw_data['htype']

	@hardware_type.setter
	def hardware_type(self, value):
		self.raw_data['htype'] = HardwareType(value).value

	@property
	def hardware_address(self):
		return self.raw_data['chaddr'][:self.raw_data['hlen']]

	@hardware_address.setter
	def hardware_address(self, value):
		if len(value) > 16:
			raise DHCPv4Error('hardware address too long: `%r`' % value)
		self.raw_data['chaddr'] = (
			bytes(value) + b'\0'*16
		)[:16]
		self.raw_data['hlen'] = len(value)

	@property
	def hops(self):
		return self.raw_data['hops']

	@hops.setter
	def hops(self, value):
		if value not in range(0x100):
			raise DHCPv4Error('`%r` not in range(0x100)' % value)
		self.raw_data['hops'] = value

	@property
	def transaction_id(self):
		return self.raw_data['xid']

	@transaction_id.setter
	def transaction_id(self, value):
		if value not in range(0x100000000):
			raise DHCPv4Error('`%r` not in range(0x100000000)' % value)
		self.raw_data['xid'] = value

	@property
	def seconds(self):
		return self.raw_data['secs']

	@seconds.setter
	def seconds(self, value):
		if value not in range(0x10000):
			raise DHCPv4Error('`%r` not in range(0x10000)' % value)
		self.raw_data['secs'] = value

	@property
	def flags(self):
		return Flags(self.raw_data['flags'])

	@flags.setter
	def flags(self, value):
		value = int(value)
		if value not in range(0x10000):
			raise DHCPv4Error('`%r` not in range(0x10000)' % value)
		self.raw_data['flags'] = value

	@property
	def client_ip(self):
		return IPv4Address(self.raw_data['ciaddr'])

	@client_ip.setter
	def client_ip(self, value):
		self.raw_data['ciaddr'] = IPv4Address(value).packed

	@property
	def your_ip(self):
		return IPv4Address(self.raw_data['yiaddr'])

	@your_ip.setter
	def your_ip(self, value):
		self.raw_data['yiaddr'] = IPv4Address(value).packed

	@property
	def server_ip(self):
		return IPv4Address(self.raw_data['siaddr'])

	@server_ip.setter
	def server_ip(self, value):
		self.raw_data['siaddr'] = IPv4Address(value).packed

	@property
	def gateway_ip(self):
		return IPv4Address(self.raw_data['giaddr'])

	@gateway_ip.setter
	def gateway_ip(self, value):
		self.raw_data['giaddr'] = IPv4Address(value).packed

	@property
	def server_name(self):
		return self.raw_data['sname'].partition(b'\0')[0]

	@server_name.setter
	def server_name(self, value):
		data = bytes(value)
		if len(data) > 64:
			raise DHCPv4Error('encoded server name too long: `%r`' % value)
		self.raw_data['sname'] = (
			data + b'\0'*64
		)[:64]

	@property
	def boot_file_name(self):
		return self.raw_data['file'].partition(b'\0')[0]

	@boot_file_name.setter
	def boot_file_name(self, value):
		data = bytes(value)
		if len(data) > 128:
			raise DHCPv4Error('encoded boot file name too long: `%r`' % value)
		self.raw_data['file'] = (
			data + b'\0'*128
		)[:128]

	def __init__(self, *, op=Operation.REQUEST, htype=HardwareType.ETH10MB,
		hops=0, xid=0, secs=0, flags=0, ciaddr=0, yiaddr=0, siaddr=0,
		giaddr=0, hwaddr=b'\x00\x00\x00\x00\x00\x00', sname=b'', file=b''):
		self.raw_data = self.NAMES()._asdict()
		self.operation = op
		self.hardware_type = htype
		self.hops = hops
		self.transaction_id = xid
		self.seconds = secs
		self.flags = flags
		self.client_ip = ciaddr
		self.your_ip = yiaddr
		self.server_ip = siaddr
		self.gateway_ip = giaddr
		self.hardware_address = hwaddr
		self.server_name = sname
		self.boot_file_name = file

	def _repr_parts(self):
		return (
			'operation={op}'.format(op=self.operation),
			'hardware_type={htype}'.format(htype=self.hardware_type),
			'hardware_address={hwaddr}'.format(hwaddr=self.hardware_address),
			'hops={hops}'.format(hops=self.hops),
			'transaction_id={xid}'.format(xid=hex(self.transaction_id)),
			'seconds={secs}'.format(secs=self.seconds),
			'flags={flags}'.format(flags=hex(self.raw_data['flags'])),
			'client_ip={ciaddr}'.format(ciaddr=self.client_ip),
			'your_ip={yiaddr}'.format(yiaddr=self.your_ip),
			'server_ip={siaddr}'.format(siaddr=self.server_ip),
			'gateway_ip={giaddr}'.format(giaddr=self.gateway_ip),
			'server_name={sname!r}'.format(sname=self.server_name),
			'boot_file_name={file!r}'.format(file=self.boot_file_name),
		)

	def __repr__(self):
		return '{cls}({parts})'.format(
			cls=type(self).__name__,
			parts=','.join(self._repr_parts())
		)

	def __eq__(self, other):
		if not isinstance(other, Header):
			return NotImplemented
		return self.raw_data == other.raw_data

	def encode(self):
		ordered_data = [self.raw_data[field] for field in self.NAMES._fields]
		return self.CODEC.pack(*ordered_data)

	@classmethod
	def decode(cls, data):
		data = bytes(data)
		if len(data) < cls.CODEC.size:
			raise TruncatedHeader('DHCP header needs %d bytes, got %d'
				% (cls.CODEC.size, len(data)))
		self = cls()
		values = cls.CODEC.unpack_from(data)
		self.raw_data = cls.NAMES._make(values)._asdict()
		return self


# NOTE: every offset below is computed from this, so refuse to load if the
# format string above ever drifts from the 236 bytes of RFC 2131
if Header.CODEC.size != HEADER_SIZE:
	raise DHCPv4Error('DHCP header is %d bytes, expected %d'
		% (Header.CODEC.size, HEADER_SIZE))


def encode_options(options):
	encoded = bytearray()
	for option_tag, option_data in options:
		if option_tag not in range(0x100):
			raise EncodeError('`%r` not in range(0x100)' % option_tag)
		if option_tag in (PAD, END):
			raise EncodeError('option %r cannot carry data' % option_tag)
		option_data = bytes(option_data)
		# NOTE: RFC 3396 splitting is not done, a long option is a bug in the
		# caller
		if len(option_data) > 255:
			raise OptionTooLong('option %s is %d bytes long, at most 255 fit'
				% (get_option(option_tag, ignore_unknown=True),
				len(option_data)))
		encoded += bytes([option_tag, len(option_data)])
		encoded += option_data
	encoded.append(END)
	return bytes(encoded)


def decode_options(raw_data, offset=0):
	"""Parse an option stream up to its end option.

	``offset`` is where ``raw_data`` starts in the packet and is only used in
	error messages. Bytes after the end option are ignored.
	"""
	options = []
	position = 0

	while True:
		if position >= len(raw_data):
			raise TruncatedStream('no end option (at offset %d)'
				% (offset + position))
		option_tag = raw_data[position]
		position += 1

		if option_tag == PAD:
			continue
		if option_tag == END:
			break

		option_tag = get_option(option_tag, ignore_unknown=True)
		if position >= len(raw_data):
			raise TruncatedStream('no length for option %s (at offset %d)'
				% (option_tag, offset + position))
		option_length = raw_data[position]
		position += 1

		option_data = bytes(raw_data[position:position + option_length])
		if len(option_data) != option_length:
			raise TruncatedStream('option %s announces %d bytes, only %d left'
				' (at offset %d)' % (option_tag, option_length,
				len(option_data), offset + position))
		position += option_length

		options.append(Option(option_tag, option_data))

	return options


class Packet:
	"""A DHCP packet: header, magic cookie and options.

	Options keep their wire order and duplicates are not merged.
	"""

	def __init__(self, header=None, options=None):
		if header is None:
			header = Header()
		self.header = header
		if options is None:
			options = []
		self.options = [Option(*option) for option in options]

	def __repr__(self):
		return '%s(%r, %r)' % (type(self).__name__, self.header, self.options)

	def __eq__(self, other):
		if not isinstance(other, Packet):
			return NotImplemented
		return (self.header == other.header
			and self.options == other.options)

	def get(self, option, default=None):
		"""Data of the first option of type ``option``."""
		for option_tag, option_data in self.options:
			if option_tag == option:
				return option_data
		return default

	def encode(self):
		return (self.header.encode() + DHCP_MAGIC_COOKIE
			+ encode_options(self.options))

	@classmethod
	def decode(cls, data):
		data = bytes(data)
		minimum = HEADER_SIZE + len(DHCP_MAGIC_COOKIE)
		if len(data) < minimum:
			raise TruncatedHeader('DHCP packet too small: %d bytes, need at'
				' least %d' % (len(data), minimum))

		header = Header.decode(data[:HEADER_SIZE])

		magic_cookie = data[HEADER_SIZE:minimum]
		if magic_cookie != DHCP_MAGIC_COOKIE:
			raise MissingMagicCookie('bad magic cookie: %s'
				% magic_cookie.hex())

		options = decode_options(data[minimum:], offset=minimum)
		return cls(header, options)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
