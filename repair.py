# -*- coding: utf-8 -*-
# vim:set ts=8 sts=8 sw=8 tw=80 noet cc=80:
"""
Validation and repair of broken morse code
"""

import logging
from enum import IntEnum

from morse import DEFAULT_FORMAT, tokenize, valid_codes

logger = logging.getLogger(__name__)

class RepairMode(IntEnum):
	# drop the broken letter
	REMOVE_INCORRECT_LETTER = 0
	# strip the characters which are not keys, else drop the letter
	REMOVE_INCORRECT_KEY = 1
	# turn the characters which are not keys into short presses, else drop
	TRY_REPLACING_WITH_SHORT_PRESS = 2
	# turn the characters which are not keys into long presses, else drop
	TRY_REPLACING_WITH_LONG_PRESS = 3
	# try each mode of the repair order, else drop
	TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE = 4

	@classmethod
	def parse(cls, name):
		if isinstance(name, cls):
			return name
		name = str(name).strip()
		if name.isdigit():
			try:
				return cls(int(name))
			except ValueError:
				pass
		else:
			try:
				return cls[name.upper().replace("-", "_")]
			except KeyError:
				pass
		raise ValueError("unknown repair mode \"%s\"" % name)

DEFAULT_MODE = RepairMode.REMOVE_INCORRECT_LETTER

# modes which work on the letter as a whole have no place in an order
WHOLE_LETTER_MODES = (RepairMode.REMOVE_INCORRECT_LETTER,
		RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE)

def repair_order(modes):
	"""
	Turn a list of repair modes into a repair order: duplicates and the
	whole letter modes are left out, the order is kept.
	"""
	result = []
	for mode in modes:
		mode = RepairMode.parse(mode)
		if mode in WHOLE_LETTER_MODES:
			logger.debug("ignoring %s in repair order", mode.name)
			continue
		if mode not in result:
			result.append(mode)
	return tuple(result)

DEFAULT_REPAIR_ORDER = repair_order([ RepairMode.REMOVE_INCORRECT_KEY,
		RepairMode.TRY_REPLACING_WITH_SHORT_PRESS,
		RepairMode.TRY_REPLACING_WITH_LONG_PRESS ])

def remove_keys(letter, fmt):
	return "".join([ c for c in letter if fmt.is_key(c) ])

def replace_keys(letter, fmt, key):
	return "".join([ c if fmt.is_key(c) else key for c in letter ])

fixes = {
	RepairMode.REMOVE_INCORRECT_KEY:
		remove_keys,
	RepairMode.TRY_REPLACING_WITH_SHORT_PRESS:
		lambda letter, fmt: replace_keys(letter, fmt, fmt.short_press),
	RepairMode.TRY_REPLACING_WITH_LONG_PRESS:
		lambda letter, fmt: replace_keys(letter, fmt, fmt.long_press),
}

def is_valid_morse(text, fmt=DEFAULT_FORMAT):
	"""
	Check if every letter of a string is valid morse code
	"""
	valid = valid_codes(fmt)
	return all([ letter in valid for letter in tokenize(text) ])

def repair_letter(letter, mode=DEFAULT_MODE, fmt=DEFAULT_FORMAT,
		order=DEFAULT_REPAIR_ORDER):
	"""
	Repair a single letter. Returns None if the letter has to be dropped.
	"""
	valid = valid_codes(fmt)
	if letter in valid:
		return letter

	if mode == RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE:
		modes = order
	elif mode in fixes:
		modes = [ mode ]
	else:
		modes = []

	for m in modes:
		if m not in fixes:
			continue
		fixed = fixes[m](letter, fmt)
		if fixed in valid:
			logger.debug("repaired '%s' -> '%s' (%s)", letter,
					fixed, getattr(m, "name", m))
			return fixed
	logger.debug("dropped '%s' (%s)", letter, getattr(mode, "name", mode))
	return None

def repair_morse(text, mode=DEFAULT_MODE, fmt=DEFAULT_FORMAT,
		order=DEFAULT_REPAIR_ORDER):
	"""
	Repair or drop every invalid letter of a string containing morse code
	"""
	mode = RepairMode.parse(mode)
	order = repair_order(order)
	letters = [ repair_letter(letter, mode, fmt, order)
			for letter in tokenize(text) ]
	return " ".join([ letter for letter in letters if letter is not None ])
