# SPDX-License-Identifier: MIT

import argparse
import logging
import sys
from sys import stderr

from ..debug_helpers.pcap import PCAP, LinkLayer
from ..error import BindFailure, SendFailure, TransportError
from ..platform_specific import list_ifaces
from .listener import Listener
from .sender import Sender
from .transport import Transport, DHCP_ADDRESS, BROADCAST_ADDRESS

BANNER = 'Type "d" to broadcast a DHCP discover packet.'
BIND_GUIDANCE = ('Replies will not be visible. Use a packet capture tool to'
	' see replies, or try re-running the program with more permissions.')


def configure_logging(output='-', level='INFO'):
	if isinstance(output, str):
		if output == '-':
			log_handler = logging.StreamHandler(stderr)
		else:
			log_handler = logging.FileHandler(output)
	else:
		log_handler = logging.StreamHandler(output)

	log_format = '{asctime}|{name}|{levelname}|{message}'
	log_formatter = logging.Formatter(log_format, style='{')
	log_handler.setFormatter(log_formatter)

	logger = logging.Logger('dhcpprobe')
	logger.addHandler(log_handler)

	logger.setLevel(level)

	return logger


class Probe:
	"""Wires one transport to a listener thread and a sender.

	Commands come from the foreground thread, replies are printed from the
	listener thread.
	"""

	COMMANDS = {
		'd': 'discover',
		'discover': 'discover',
		's': 'status',
		'status': 'status',
		'q': 'quit',
		'quit': 'quit',
	}

	def __init__(self, logger, transport, *, listener=None, sender=None,
		output=None, rng=None):
		self.logger = logger
		self.transport = transport
		self.output = output
		if listener is None:
			listener = Listener(logger, transport, output=output)
		self.listener = listener
		if sender is None:
			sender = Sender(logger, transport, rng=rng, output=output)
		self.sender = sender
		self.running = False

	def __enter__(self):
		self.run()
		return self

	def __exit__(self, *exc_info):
		self.stop()

	def write(self, text):
		output = sys.stdout if self.output is None else self.output
		output.write(text + '\n')
		output.flush()

	def run(self):
		if self.running:
			return False
		self.transport.open()
		try:
			self.transport.bind()
		except BindFailure as e:
			self.logger.error('error while attempting to bind socket: %s', e)
			self.logger.error(BIND_GUIDANCE)
		self.listener.start()
		self.running = True
		return True

	def stop(self):
		if not self.running:
			return False
		self.running = False
		# NOTE: the listener may be blocked in recvfrom(), it has to be gone
		# before the socket is closed under it
		self.listener.stop()
		self.transport.close()
		return True

	def do_discover(self):
		if not self.listener.is_alive():
			self.logger.warning('listener is not running, replies will not be'
				' shown')
		try:
			self.sender.send_discover()
		except SendFailure as e:
			self.logger.error('could not send discover packet: %s', e)

	def do_status(self):
		state = self.listener.state.value
		if self.listener.failure is None:
			self.write('Listener is %s.' % state)
		else:
			self.write('Listener is %s: %s' % (state, self.listener.failure))

	def do_quit(self):
		return False

	def handle_command(self, line):
		"""Run one command line, return False once the operator wants out."""
		words = line.split()
		if not words:
			self.write('Enter a command.')
			return True

		command = self.COMMANDS.get(words[0].lower())
		if command is None:
			self.write('Unrecognized command.')
			return True

		handler = getattr(self, 'do_%s' % command)
		return handler() is not False

	def command_loop(self, lines=None):
		if lines is None:
			lines = sys.stdin
		self.write(BANNER)
		for line in lines:
			if not self.handle_command(line):
				break


def main(argv=None):
	parser = argparse.ArgumentParser(description='Broadcast DHCP discover'
		' packets and print every reply.')
	parser.add_argument('-f', '--log-file', default='-',
		help='location to log messages, - for stderr')
	parser.add_argument('-l', '--log-level', default='INFO', choices=('ALL',
		'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'), type=str.upper,
		help='verbosity of log messages, in descending order')
	parser.add_argument('-b', '--bind', metavar='ADDRESS',
		default=DHCP_ADDRESS, help='address on which to listen for replies')
	parser.add_argument('-t', '--target', metavar='ADDRESS',
		default=BROADCAST_ADDRESS, help='address to send discover packets to')
	parser.add_argument('-i', '--interface', metavar='IF', default=None,
		choices=list_ifaces(),
		help='only use this interface: one of %(choices)s')
	parser.add_argument('-p', '--pcap', metavar='FILE', default=None,
		help='on exit, save every packet sent or received to this file')
	args = parser.parse_args(argv)

	level = 0 if args.log_level == 'ALL' else getattr(logging, args.log_level)
	logger = configure_logging(output=args.log_file, level=level)

	pcap = None
	if args.pcap is not None:
		pcap = PCAP(link_layer=LinkLayer.RAW_IPV4)

	transport = Transport(logger, bind_address=args.bind,
		target_address=args.target, interface=args.interface, capture=pcap)
	probe = Probe(logger, transport)

	status = 0
	try:
		probe.run()
		probe.command_loop()
	except KeyboardInterrupt:
		pass
	except TransportError as e:
		logger.error('could not open socket (caused by %s)', e)
		status = 1
	finally:
		probe.stop()
		if pcap is not None:
			pcap.save(args.pcap)
			logger.info('saved %d packets to %s', len(pcap), args.pcap)
	return status


if __name__ == '__main__':
	sys.exit(main())

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
