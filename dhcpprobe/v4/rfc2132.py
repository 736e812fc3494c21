# SPDX-License-Identifier: MIT

__all__ = ['RFC2132OptionType', 'MessageType', 'NetBIOSNodeType',
	'rfc2132_option_codec']

from .rfc2132optiontype import RFC2132OptionType, MessageType, NetBIOSNodeType
from .rfc2132_option_codec import rfc2132_option_codec

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
