# -*- coding: utf-8 -*-
# vim:set ts=8 sts=8 sw=8 tw=80 noet cc=80:

import logging

from morse import DEFAULT_FORMAT, Format, KeyTable, switch_format
from repair import DEFAULT_MODE, DEFAULT_REPAIR_ORDER, is_valid_morse, \
		repair_morse, repair_order

logger = logging.getLogger(__name__)

def read_file(path):
	"""
	Read a whole text file. Errors are not hidden: a file that can not be
	read raises OSError, an empty file gives an empty string.
	"""
	with open(path) as f:
		return f.read()

class Converter(object):
	def __init__(self, fmt=DEFAULT_FORMAT, order=DEFAULT_REPAIR_ORDER):
		self.set_repair_order(order)
		self.set_format(fmt)

	def set_format(self, *keys):
		"""
		Use another format: either a Format or all three keys
		(long press, short press, space)
		"""
		if len(keys) == 1 and isinstance(keys[0], Format):
			fmt = keys[0]
		elif len(keys) == 1 and len(keys[0]) == 3:
			fmt = Format(*keys[0])
		elif len(keys) == 3:
			fmt = Format(*keys)
		else:
			raise TypeError("set_format() takes a Format or "
					"three keys")
		# format and table are swapped together
		self.format, self.table = fmt, KeyTable(fmt)
		logger.debug("converter now uses format '%s'", fmt)

	def set_repair_order(self, modes):
		self.repair_order = repair_order(modes)

	def encode(self, text):
		return self.table.encode(text)

	def decode(self, morse):
		return self.table.decode(morse)

	def encode_file(self, path):
		return self.encode(read_file(path))

	def decode_file(self, path):
		return self.decode(read_file(path))

	def is_valid(self, morse):
		return is_valid_morse(morse, self.format)

	def repair(self, morse, mode=DEFAULT_MODE):
		return repair_morse(morse, mode, self.format, self.repair_order)

	def default_to_member(self, morse):
		return switch_format(morse, DEFAULT_FORMAT, self.format)

	def member_to_default(self, morse):
		return switch_format(morse, self.format, DEFAULT_FORMAT)

	def switch_format_to_member(self, morse, fmt):
		return switch_format(morse, fmt, self.format)

	def switch_format_from_member(self, morse, fmt):
		return switch_format(morse, self.format, fmt)

	def copy(self):
		return Converter(self.format, self.repair_order)

	def __repr__(self):
		return "Converter('%s')" % (self.format,)
