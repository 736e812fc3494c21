# SPDX-License-Identifier: MIT

import threading
from enum import Enum, IntEnum
from struct import Struct
from time import time_ns

VERSION = (2, 4)
MAGIC = 0xA1B2C3D4


class Endian(Enum):
	NATIVE = '='
	BIG = '>'
	LITTLE = '<'


class LinkLayer(IntEnum):
	IEEE_802_3 = 0x00000001
	ETHERNET = IEEE_802_3
	RAW_IP = 0x00000065
	RAW_IPV4 = 0x000000E4
	RAW_IPV6 = 0x000000E5


# magic, version major/minor, timezone, accuracy, snapshot length, link layer
HEADER_FMT = '%sIHHiIII'
# seconds, microseconds, captured length, original length
PACKET_FMT = '%sIIII'

# NOTE: pcap format
# https://www.netresec.com/?page=Blog&month=2022-10&post=What-is-a-PCAP-file


class Packet:
	def __init__(self, data, timestamp=None):
		self.data = data

		if timestamp is None:
			timestamp = time_ns()
		self.timestamp = timestamp

	def __repr__(self):
		if len(self.data) > 20:
			data_window = self.data[:16] + b'...'
		else:
			data_window = self.data
		return '%s(%r)' % (type(self).__name__, data_window)


class PCAP:
	"""In-memory capture, written out in one go with `save()`.

	`add()` may be called from several threads at once.
	"""

	def __init__(self, *, link_layer, max_packet=0xFFFF, endian=None,
		timezone=0, accuracy=0):
		self.link_layer = link_layer
		self.max_packet = max_packet

		if endian is None:
			endian = Endian.BIG
		else:
			endian = Endian(endian)
		self.endian = endian

		self.timezone = timezone
		self.accuracy = accuracy

		self.header_struct = Struct(HEADER_FMT % self.endian.value)
		self.packet_struct = Struct(PACKET_FMT % self.endian.value)
		self.packets = []
		self.lock = threading.Lock()

	def __len__(self):
		with self.lock:
			return len(self.packets)

	def add(self, data, timestamp=None):
		packet = Packet(bytes(data), timestamp)
		with self.lock:
			self.packets.append(packet)

	def encode(self):
		with self.lock:
			packets = list(self.packets)
		header = self.header_struct.pack(MAGIC, VERSION[0], VERSION[1],
			self.timezone, self.accuracy, self.max_packet, self.link_layer)
		records = [
			self.packet_struct.pack(
				packet.timestamp//1000000000,
				(packet.timestamp//1000)%1000000,
				min(self.max_packet, len(packet.data)),
				len(packet.data)
			) + packet.data[:self.max_packet]
			for packet
			in packets
		]
		return header + b''.join(records)

	def save(self, filename):
		with open(filename, 'wb') as pcap_file:
			pcap_file.write(self.encode())

	@classmethod
	def decode(cls, data):
		magic, = Struct('>I').unpack_from(data)
		if magic == MAGIC:
			# big endian, epoch time
			endian = Endian.BIG
		elif magic == 0xD4C3B2A1:
			# little endian, epoch time
			endian = Endian.LITTLE
		else:
			raise ValueError('bad magic value: %s' % hex(magic))

		header_struct = Struct(HEADER_FMT % endian.value)
		(_, _, _, timezone, accuracy, max_packet,
			link_layer) = header_struct.unpack_from(data)

		self = cls(link_layer=link_layer, max_packet=max_packet,
			endian=endian, timezone=timezone, accuracy=accuracy)

		offset = self.header_struct.size
		while offset < len(data):
			(seconds, microseconds, captured_length,
				_) = self.packet_struct.unpack_from(data, offset)
			offset += self.packet_struct.size

			nanoseconds = seconds*1000000000 + microseconds*1000
			packet_data = data[offset:offset + captured_length]
			self.packets.append(Packet(packet_data, nanoseconds))

			offset += captured_length
		return self

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
