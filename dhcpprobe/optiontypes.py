# SPDX-License-Identifier: MIT

__all__ = ['TypeRegistry']


class TypeRegistry:
	def __init__(self):
		self.OptionTypes = []

	def register(self, OptionType, priority=None):
		if priority is None:
			priority = len(self.OptionTypes)
		self.OptionTypes.insert(priority, OptionType)

	def unregister(self, OptionType):
		try:
			self.OptionTypes.remove(OptionType)
		except ValueError:
			pass

	def get(self, value, ignore_unknown=False):
		for OptionType in self.OptionTypes:
			try:
				return OptionType(value)
			except ValueError:
				continue
		else:
			if ignore_unknown:
				return value
			else:
				raise ValueError(
					'%r is not a valid option for all registered option types'
					% value
				)

	def label(self, value):
		"""Name of an option type as printed in reports.

		Unknown option types are printed as their decimal code.
		"""
		return str(self.get(value, ignore_unknown=True))

# NOTE: option type enumerations SHOULD be of the format <name>OptionType, be
# a subclass of enum.IntEnum and print as their report label through __str__

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
