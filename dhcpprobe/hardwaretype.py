# SPDX-License-Identifier: MIT

__all__ = ['HardwareType', 'hardware_address_length']

import enum

# NOTE: hardware types come from the following:
# https://www.iana.org/assignments/arp-parameters/arp-parameters.xhtml

@enum.unique
class HardwareType(enum.IntEnum):
	RESERVED = 0
	ETH10MB = 1
	EXPERIMENTAL_ETHERNET = 2
	AX25 = 3
	IEEE_802 = 6
	LOCALTALK = 11
	FIBRE_CHANNEL = 18
	IEEE_1394 = 24
	INFINIBAND = 32


ADDRESS_LENGTHS = {
	HardwareType.ETH10MB: 6,
	HardwareType.EXPERIMENTAL_ETHERNET: 6,
	HardwareType.IEEE_802: 6,
	HardwareType.IEEE_1394: 8,
}


def hardware_address_length(htype):
	"""Length in bytes of a hardware address of type ``htype``."""
	try:
		return ADDRESS_LENGTHS[HardwareType(htype)]
	except (KeyError, ValueError):
		raise ValueError('unknown address length for hardware type %r'
			% htype) from None

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
