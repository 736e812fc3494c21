# SPDX-License-Identifier: MIT

import logging

import pytest

from dhcpprobe.v4.message import Header, HEADER_SIZE, DHCP_MAGIC_COOKIE

# NOTE: options of a real offer, as captured from a home router
EXAMPLE_OPTIONS = bytes.fromhex(
	'35 01 02'
	'0F 17 68 6F 6D 65 2E 74 68 65 63 79 62 65 72 73 68 61 64 6F 77 2E 6E 65'
	' 74'
	'01 04 FF FF FF 00'
	'06 04 C0 A8 00 01'
	'03 04 C0 A8 00 01'
	'05 04 C0 A8 00 01'
	'36 04 C0 A8 00 01'
	'33 04 00 00 8C A0'
	'FF'
)


def make_raw_packet(options, header=None):
	"""Header, magic cookie and ``options`` verbatim."""
	if header is None:
		header = Header()
	raw_header = header.encode()
	assert len(raw_header) == HEADER_SIZE
	return raw_header + DHCP_MAGIC_COOKIE + options


@pytest.fixture
def logger():
	logger = logging.getLogger('dhcpprobe.tests')
	logger.setLevel(logging.DEBUG)
	return logger

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
