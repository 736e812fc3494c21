"""dhcpprobe

Broadcast a DHCP discover and watch what answers

"""

__version__ = '0.1.0'
__date__ = '2026-10-18'
# SPDX-License-Identifier: MIT
__license__ = 'MIT'

try:
	from . import v4 as ipv4
except ImportError as e:
	print('Could not import dhcpprobe: %r' % e)
	raise

__all__ = ['ipv4']

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
