# SPDX-License-Identifier: MIT

from ipaddress import IPv4Address

import pytest

from dhcpprobe.error import BadOptionLength
from dhcpprobe.option_codecs import CodecError, Codec
from dhcpprobe.v4 import (decode_option, encode_option, option_label,
	register_codec, unregister_codec)
from dhcpprobe.v4.rfc2132 import (RFC2132OptionType, MessageType,
	NetBIOSNodeType)


@pytest.mark.parametrize('option, label', [
	(RFC2132OptionType.DHCP_MESSAGE_TYPE, 'dhcpMessageType'),
	(RFC2132OptionType.LEASE_TIME, 'leaseTime'),
	(RFC2132OptionType.DOMAIN_NAME_SERVER, 'domainNameServer'),
	(46, 'netbiosNodeType'),
	(1, 'subnetMask'),
	(200, '200'),
])
def test_labels(option, label):
	assert option_label(option) == label


@pytest.mark.parametrize('data, text', [
	(b'\x01', 'discover'),
	(b'\x02', 'offer'),
	(b'\x05', 'ack'),
	(b'\x08', 'inform'),
])
def test_message_type(data, text):
	value = decode_option(RFC2132OptionType.DHCP_MESSAGE_TYPE, data)

	assert isinstance(value, MessageType)
	assert str(value) == text


def test_message_type_unmapped_is_numeric():
	assert decode_option(RFC2132OptionType.DHCP_MESSAGE_TYPE, b'\x2A') == 42


@pytest.mark.parametrize('data', [b'', b'\x01\x02'])
def test_message_type_bad_length(data):
	with pytest.raises(BadOptionLength) as excinfo:
		decode_option(RFC2132OptionType.DHCP_MESSAGE_TYPE, data)

	error = excinfo.value
	assert error.option == RFC2132OptionType.DHCP_MESSAGE_TYPE
	assert error.length == len(data)
	assert 'dhcpMessageType (53)' in str(error)


def test_bad_length_message_for_plain_codes():
	assert str(BadOptionLength(3, 'a multiple of 2 bytes', 57)) == (
		'bad option 57 data length 3, expected a multiple of 2 bytes')
	assert str(BadOptionLength(0, 'exactly 1 byte')) == (
		'bad option data length 0, expected exactly 1 byte')


@pytest.mark.parametrize('data, value, text', [
	(b'\x01', NetBIOSNodeType.B_NODE, 'bNode'),
	(b'\x02', NetBIOSNodeType.P_NODE, 'pNode'),
	(b'\x03', NetBIOSNodeType.M_NODE, 'mNode'),
	(b'\x04', NetBIOSNodeType.H_NODE, 'hNode'),
])
def test_netbios_node_type(data, value, text):
	decoded = decode_option(RFC2132OptionType.NETBIOS_NODE_TYPE, data)

	assert decoded is value
	assert str(decoded) == text


def test_netbios_node_type_unmapped_and_bad_length():
	assert decode_option(RFC2132OptionType.NETBIOS_NODE_TYPE, b'\x08') == 8

	with pytest.raises(BadOptionLength):
		decode_option(RFC2132OptionType.NETBIOS_NODE_TYPE, b'\x01\x01')


def test_address_list():
	value = decode_option(RFC2132OptionType.ROUTER,
		b'\xC0\xA8\x00\x01\x0A\x00\x00\xFE')

	assert value == [IPv4Address('192.168.0.1'), IPv4Address('10.0.0.254')]


@pytest.mark.parametrize('option', [1, 3, 4, 5, 6, 54])
def test_address_list_bad_length(option):
	with pytest.raises(BadOptionLength):
		decode_option(option, b'\xC0\xA8\x00')


def test_integer_list():
	assert decode_option(RFC2132OptionType.LEASE_TIME,
		b'\x00\x00\x8C\xA0') == [36000]
	# NOTE: printed unsigned, as on the wire
	assert decode_option(RFC2132OptionType.TIME_OFFSET,
		b'\xFF\xFF\xFF\xFF\x00\x00\x00\x01') == [0xFFFFFFFF, 1]


@pytest.mark.parametrize('option', [2, 51, 58, 59])
def test_integer_list_bad_length(option):
	with pytest.raises(BadOptionLength):
		decode_option(option, b'\x00\x00\x8C')


def test_text_never_fails():
	assert decode_option(RFC2132OptionType.DOMAIN_NAME,
		b'example.org') == 'example.org'
	assert decode_option(RFC2132OptionType.DOMAIN_NAME, b'\xFFok') == (
		'\ufffdok')
	assert decode_option(RFC2132OptionType.DOMAIN_NAME, b'') == ''


@pytest.mark.parametrize('option, data', [
	(RFC2132OptionType.LOG_SERVER, b'\x0A\x00'),
	(RFC2132OptionType.HOST_NAME, b'pc'),
	(RFC2132OptionType.INTERFACE_MTU, b'\x05'),
	(RFC2132OptionType.REQUESTED_IP_ADDRESS, b'\xC0\xA8\x00'),
	(RFC2132OptionType.PARAMETER_REQUEST_LIST, b'\x01\x03\x06'),
	(RFC2132OptionType.MAXIMUM_MESSAGE_SIZE, b'\x05\xDC\x00'),
])
def test_labelled_options_without_rule_are_raw(option, data):
	assert decode_option(option, data) == data


def test_unknown_option_is_raw():
	assert decode_option(250, b'\xDE\xAD') == b'\xDE\xAD'
	assert decode_option(RFC2132OptionType.CLIENT_IDENTIFIER,
		b'\x01\x02') == b'\x01\x02'


def test_encoders():
	assert encode_option(RFC2132OptionType.SUBNET_MASK,
		'255.255.255.0') == b'\xFF\xFF\xFF\x00'
	assert encode_option(RFC2132OptionType.ROUTER,
		['192.168.0.1', '10.0.0.1']) == b'\xC0\xA8\x00\x01\x0A\x00\x00\x01'
	assert encode_option(RFC2132OptionType.LEASE_TIME, 36000) == (
		b'\x00\x00\x8C\xA0')
	assert encode_option(RFC2132OptionType.DHCP_MESSAGE_TYPE,
		MessageType.REQUEST) == b'\x03'
	assert encode_option(RFC2132OptionType.NETBIOS_NODE_TYPE,
		NetBIOSNodeType.H_NODE) == b'\x04'
	assert encode_option(RFC2132OptionType.DOMAIN_NAME, 'lan') == b'lan'

	with pytest.raises(ValueError):
		encode_option(RFC2132OptionType.DHCP_MESSAGE_TYPE, 9)
	with pytest.raises(ValueError):
		encode_option(RFC2132OptionType.ROUTER, ['not an address'])


def test_registered_codec_takes_over():
	codec = Codec(name='test', codecs={
		250: (bytes, lambda encoded: encoded.decode('ascii').upper()),
	})
	register_codec(codec, priority=0)
	try:
		assert decode_option(250, b'abc') == 'ABC'
	finally:
		unregister_codec(codec)

	assert decode_option(250, b'abc') == b'abc'


def test_unknown_option_strict():
	with pytest.raises(CodecError):
		decode_option(250, b'', ignore_unknown=False)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
