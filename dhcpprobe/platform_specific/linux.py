# SPDX-License-Identifier: CC0-1.0

import os
import socket


def list_ifaces():
	return sorted(os.listdir('/sys/class/net'))


def broadcast_socket(interface=None):
	"""IPv4 UDP socket allowed to send to broadcast addresses.

	With ``interface``, the socket only sends and receives through that
	network interface, which needs CAP_NET_RAW.
	"""
	sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
	try:
		sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
		sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
		if interface is not None:
			if isinstance(interface, str):
				interface = interface.encode('utf-8')
			# NOTE: the kernel wants a NUL-terminated name, see socket(7)
			sock.setsockopt(socket.SOL_SOCKET, socket.SO_BINDTODEVICE,
				interface + b'\0')
	except OSError:
		sock.close()
		raise
	return sock

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
