# SPDX-License-Identifier: MIT

"""Synthetic IPv4/UDP framing for captured DHCP datagrams

A UDP socket only ever hands us payloads; these helpers rebuild plausible
IP and UDP headers around them so the capture opens in packet analyzers.
"""

__all__ = ['calculate_internet_checksum', 'encapsulate_udp',
	'encapsulate_ipv4', 'encapsulate_datagram']

import socket
import struct
from ipaddress import IPv4Address

IPV4_FLAG_DONT_FRAGMENT = 0x02

ipv4_header = struct.Struct('!BBHHHBBH4s4s')
udp_header = struct.Struct('!HHHH')
ipv4_pseudoheader = struct.Struct('!4s4sxBH')


def calculate_internet_checksum(packet):
	"""Calculate checksum of data as defined in RFC791."""
	if len(packet)%2:
		packet += b'\x00'

	checksum = 0
	for msb, lsb in zip(packet[0::2], packet[1::2]):
		checksum += msb << 8 | lsb
		checksum = (checksum & 0xFFFF) + (checksum >> 16)
	return ~checksum & 0xFFFF


def encapsulate_udp(source, destination, data, *, source_port,
	destination_port):
	source = IPv4Address(source)
	destination = IPv4Address(destination)
	for port in (source_port, destination_port):
		if port not in range(1 << 16):
			raise ValueError('bad port: %r' % port)

	length = udp_header.size + len(data)
	pseudoheader = ipv4_pseudoheader.pack(source.packed, destination.packed,
		socket.IPPROTO_UDP, length)
	checksum = calculate_internet_checksum(pseudoheader
		+ udp_header.pack(source_port, destination_port, length, 0) + data)
	# NOTE: a computed checksum of zero is sent as all ones (RFC 768)
	checksum = checksum or 0xFFFF

	return udp_header.pack(source_port, destination_port, length,
		checksum) + data


def encapsulate_ipv4(source, destination, protocol, data, *,
	identification=0, time_to_live=64):
	source = IPv4Address(source)
	destination = IPv4Address(destination)

	if identification not in range(1 << 16):
		raise ValueError('bad identification: %r' % identification)
	if time_to_live not in range(1 << 8):
		raise ValueError('bad TTL: %r' % time_to_live)

	version_and_length = (4 << 4) | (ipv4_header.size//4)
	total_length = ipv4_header.size + len(data)

	def pack(checksum):
		return ipv4_header.pack(version_and_length, 0, total_length,
			identification, IPV4_FLAG_DONT_FRAGMENT << 13, time_to_live,
			protocol, checksum, source.packed, destination.packed)

	return pack(calculate_internet_checksum(pack(0))) + data


def encapsulate_datagram(source, destination, data):
	"""Wrap a UDP payload; ``source`` and ``destination`` are (ip, port)."""
	(source_ip, source_port), (destination_ip, destination_port) = (
		source, destination)
	udp = encapsulate_udp(source_ip, destination_ip, bytes(data),
		source_port=source_port, destination_port=destination_port)
	return encapsulate_ipv4(source_ip, destination_ip, socket.IPPROTO_UDP,
		udp)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
