"""dhcpprobe.v4

IPv4 DHCP packets, their printed form and the probe around them

"""

__date__ = '2026-10-18'
# SPDX-License-Identifier: MIT
__license__ = 'MIT'

try:
	from .message import *
	from .message import __all__ as message_all
	from .rfc2132 import *
	from .rfc2132 import __all__ as rfc2132_all
	from .printer import *
	from .printer import __all__ as printer_all
	from .optiontypes import (register as register_type,
		unregister as unregister_type, get as get_option,
		label as option_label)
	from .option_codecs import (register as register_codec,
		unregister as unregister_codec, get as get_codec,
		encode as encode_option, decode as decode_option)
except ImportError as e:
	print('Could not import DHCP: %r' % e)
	raise

option_codecs_all = ['register_codec', 'unregister_codec', 'get_codec',
	'encode_option', 'decode_option']

optiontypes_all = ['register_type', 'unregister_type', 'get_option',
	'option_label']

__all__ = [
	*message_all,
	*rfc2132_all,
	*printer_all,
	*option_codecs_all,
	*optiontypes_all
]

# NOTE: rfc2131 - header layout, magic cookie, option stream
# NOTE: rfc2132 - only the options listed in rfc2132optiontype are decoded
# XXX: rfc3396 - long options are refused rather than split

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
