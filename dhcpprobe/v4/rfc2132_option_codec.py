# SPDX-License-Identifier: MIT

from functools import wraps
from ipaddress import IPv4Address
from struct import Struct

from .option_codecs import register as register_optioncodec, Codec
from ..error import BadOptionLength
from .rfc2132optiontype import RFC2132OptionType, MessageType, NetBIOSNodeType

uint8 = Struct('!B')
uint32 = Struct('!I')

def make_guarded(fn, check, expected):
	"""Make a decoder refuse data whose length fails ``check``."""
	@wraps(fn)
	def wrapper(encoded):
		if not check(len(encoded)):
			raise BadOptionLength(len(encoded), expected)
		return fn(encoded)
	return wrapper

def make_enum_codec(Enumeration):
	def encode_enum(decoded):
		return uint8.pack(Enumeration(decoded))

	def decode_enum(encoded):
		value = encoded[0]
		try:
			return Enumeration(value)
		except ValueError:
			# NOTE: unmapped values are still printable, as a number
			return value

	return (
		encode_enum,
		make_guarded(decode_enum, lambda n: n == 1, 'exactly 1 byte')
	)

def make_integer_list_codec(struct):
	def encode_integers(decoded):
		if isinstance(decoded, int):
			decoded = (decoded,)
		return b''.join(struct.pack(value) for value in decoded)

	def decode_integers(encoded):
		return [value for value, in struct.iter_unpack(bytes(encoded))]

	return (
		encode_integers,
		make_guarded(decode_integers, lambda n: n%struct.size == 0,
			'a multiple of %d bytes' % struct.size)
	)

def encode_ips(decoded):
	if isinstance(decoded, (str, int, IPv4Address)):
		decoded = (decoded,)
	try:
		return b''.join(IPv4Address(value).packed for value in decoded)
	except Exception:
		raise ValueError('invalid decoded IP list: %r' % (decoded,)) from None

def decode_ips(encoded):
	encoded = bytes(encoded)
	return [IPv4Address(encoded[i:i + 4]) for i in range(0, len(encoded), 4)]

def encode_string(decoded):
	if isinstance(decoded, str):
		return decoded.encode('utf-8')
	return bytes(decoded)

def decode_string(encoded):
	return bytes(encoded).decode('utf-8', errors='replace')

message_type_codec = make_enum_codec(MessageType)
netbios_node_type_codec = make_enum_codec(NetBIOSNodeType)
ip_list_codec = (
	encode_ips,
	make_guarded(decode_ips, lambda n: n%4 == 0, 'a multiple of 4 bytes')
)
uint32_list_codec = make_integer_list_codec(uint32)
string_codec = (encode_string, decode_string)

rfc2132_option_codec = Codec(
	name='rfc2132',
	# NOTE: every other option, labelled or not, is printed as raw bytes
	codecs={
		# XXX: a subnet mask is a single address by definition, but it is
		# printed with the same rule as the address lists
		RFC2132OptionType.SUBNET_MASK: ip_list_codec,
		RFC2132OptionType.TIME_OFFSET: uint32_list_codec,
		RFC2132OptionType.ROUTER: ip_list_codec,
		RFC2132OptionType.TIME_SERVER: ip_list_codec,
		RFC2132OptionType.NAME_SERVER: ip_list_codec,
		RFC2132OptionType.DOMAIN_NAME_SERVER: ip_list_codec,
		RFC2132OptionType.DOMAIN_NAME: string_codec,
		RFC2132OptionType.NETBIOS_NODE_TYPE: netbios_node_type_codec,
		RFC2132OptionType.LEASE_TIME: uint32_list_codec,
		RFC2132OptionType.DHCP_MESSAGE_TYPE: message_type_codec,
		RFC2132OptionType.SERVER_IDENTIFIER: ip_list_codec,
		RFC2132OptionType.RENEWAL_TIME: uint32_list_codec,
		RFC2132OptionType.REBINDING_TIME: uint32_list_codec,
	}
)

register_optioncodec(rfc2132_option_codec)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
