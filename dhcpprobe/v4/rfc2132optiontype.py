# SPDX-License-Identifier: MIT

__all__ = ['RFC2132OptionType', 'MessageType', 'NetBIOSNodeType']

import enum

from .optiontypes import register as register_optiontype


# NOTE: options missing here are labelled with their numeric code
@enum.unique
class RFC2132OptionType(enum.IntEnum):
	PAD = 0
	SUBNET_MASK = 1
	TIME_OFFSET = 2
	ROUTER = 3
	TIME_SERVER = 4
	NAME_SERVER = 5
	DOMAIN_NAME_SERVER = 6
	LOG_SERVER = 7
	HOST_NAME = 12
	DOMAIN_NAME = 15
	INTERFACE_MTU = 26
	BROADCAST_ADDRESS = 28
	NTP_SERVERS = 42
	NETBIOS_NAME_SERVER = 44
	NETBIOS_NODE_TYPE = 46
	REQUESTED_IP_ADDRESS = 50
	LEASE_TIME = 51
	DHCP_MESSAGE_TYPE = 53
	SERVER_IDENTIFIER = 54
	PARAMETER_REQUEST_LIST = 55
	MESSAGE = 56
	MAXIMUM_MESSAGE_SIZE = 57
	RENEWAL_TIME = 58
	REBINDING_TIME = 59
	VENDOR_CLASS_IDENTIFIER = 60
	CLIENT_IDENTIFIER = 61
	TFTP_SERVER_NAME = 66
	BOOTFILE_NAME = 67
	END = 255

	def __str__(self):
		# DHCP_MESSAGE_TYPE -> dhcpMessageType
		first, *rest = self.name.lower().split('_')
		return first + ''.join(word.capitalize() for word in rest)


@enum.unique
class MessageType(enum.IntEnum):
	DISCOVER = 1
	OFFER = 2
	REQUEST = 3
	DECLINE = 4
	ACK = 5
	NAK = 6
	RELEASE = 7
	INFORM = 8

	def __str__(self):
		return self.name.lower()


# XXX: numbered 1 to 4, not the 0x1/0x2/0x4/0x8 bits of RFC 2132, so an
# RFC-coded m-node (4) prints as hNode and an RFC-coded h-node (8) is
# printed as a number
@enum.unique
class NetBIOSNodeType(enum.IntEnum):
	B_NODE = 1
	P_NODE = 2
	M_NODE = 3
	H_NODE = 4

	def __str__(self):
		# H_NODE -> hNode
		return self.name[0].lower() + self.name[2:].capitalize()


register_optiontype(RFC2132OptionType)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
