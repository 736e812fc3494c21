# SPDX-License-Identifier: MIT

from ..optiontypes import TypeRegistry

registry = TypeRegistry()

register = registry.register
unregister = registry.unregister
get = registry.get
label = registry.label

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
