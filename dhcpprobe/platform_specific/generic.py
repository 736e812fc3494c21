# SPDX-License-Identifier: CC0-1.0

import socket


def list_ifaces():
	return sorted(name for index, name in socket.if_nameindex())


def broadcast_socket(interface=None):
	if interface is not None:
		raise OSError('binding to an interface is only supported on Linux')
	sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
	try:
		sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
		sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
	except OSError:
		sock.close()
		raise
	return sock

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
