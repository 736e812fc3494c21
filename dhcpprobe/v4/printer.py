# SPDX-License-Identifier: MIT

"""Human-readable reports of DHCP packets

Rendering never touches the network and never writes anything; callers
decide where the text goes.
"""

__all__ = ['render_packet', 'render_option', 'format_value', 'format_hex',
	'format_hardware_address']

from .optiontypes import label as option_label
from .option_codecs import decode as decode_option


def format_hex(data, separator=' '):
	return separator.join('%02X' % byte for byte in data)


def format_hardware_address(data):
	return format_hex(data, ':')


def format_text(data):
	return bytes(data).decode('utf-8', errors='replace')


def format_value(value):
	"""Format a decoded option value.

	Lists are comma-separated, raw bytes are hex and everything else, enum
	members included, prints through ``str()``.
	"""
	if isinstance(value, (bytes, bytearray)):
		return format_hex(value)
	if isinstance(value, (list, tuple)):
		return ', '.join(format_value(element) for element in value)
	return str(value)


def render_option(option):
	option_tag, option_data = option
	return format_value(decode_option(option_tag, option_data))


def render_packet(packet):
	header = packet.header
	lines = [
		'  op={op} chaddr={chaddr} hops={hops} xid={xid:08X} secs={secs}'
		' flags={flags:04X}'.format(
			op=str(header.operation),
			chaddr=format_hardware_address(header.hardware_address),
			hops=header.hops,
			xid=header.transaction_id,
			secs=header.seconds,
			flags=header.raw_data['flags'],
		),
		'  ciaddr={ciaddr} yiaddr={yiaddr} siaddr={siaddr} giaddr={giaddr}'
		' sname={sname} file={file}'.format(
			ciaddr=header.client_ip,
			yiaddr=header.your_ip,
			siaddr=header.server_ip,
			giaddr=header.gateway_ip,
			sname=format_text(header.server_name),
			file=format_text(header.boot_file_name),
		),
		'  %d options:' % len(packet.options),
	]
	for option in packet.options:
		lines.append('    %s: %s' % (option_label(option[0]),
			render_option(option)))
	return '\n'.join(lines)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
