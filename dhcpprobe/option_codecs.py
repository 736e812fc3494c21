# SPDX-License-Identifier: MIT

__all__ = ['CodecError', 'BadOptionLength', 'Codec', 'CodecRegistry']

from .error import Error, BadOptionLength


class CodecError(Error):
	pass


def identity(value):
	return value


class Codec:
	def __init__(self, *, name=None, codecs=None):
		if name is None:
			name = 'codec_%s' % id(self)
		self.name = name
		if codecs is None:
			codecs = {}
		self.codecs = codecs

	def get_codec(self, option):
		try:
			return self.codecs[option]
		except KeyError:
			raise CodecError('option %r cannot be encoded by this codec (%s)'
				% (option, self.name)
			) from None

	def __contains__(self, option):
		return option in self.codecs


class CodecRegistry:
	"""Ordered set of codecs, searched first to last.

	Options no registered codec knows about are passed through as raw bytes
	unless ``ignore_unknown`` is false.
	"""

	def __init__(self):
		self.option_codecs = []

	def register(self, option_codec, priority=None):
		if not isinstance(option_codec, Codec):
			raise CodecError('%r is not an instance of Codec' % option_codec)
		if priority is None:
			priority = len(self.option_codecs)
		self.option_codecs.insert(priority, option_codec)

	def unregister(self, option_codec):
		try:
			self.option_codecs.remove(option_codec)
		except ValueError:
			pass

	def get(self, option, ignore_unknown=True):
		for option_codec in self.option_codecs:
			try:
				return option_codec.get_codec(option)
			except CodecError:
				continue
		else:
			if ignore_unknown:
				return identity, bytes
			else:
				raise CodecError(
					'%r is not a valid option for all registered option codecs'
					% option
				)

	def encode(self, option, value, ignore_unknown=True):
		encoder, decoder = self.get(option, ignore_unknown)
		return encoder(value)

	def decode(self, option, value, ignore_unknown=True):
		encoder, decoder = self.get(option, ignore_unknown)
		try:
			return decoder(value)
		except BadOptionLength as e:
			if e.option is not None:
				raise
			raise BadOptionLength(e.length, e.expected, option) from None

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
