# -*- coding: utf-8 -*-
# vim:set ts=8 sts=8 sw=8 tw=80 noet cc=80:
"""
Functions to encode and decode morse code written with any three symbols
"""

import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

class FormatError(ValueError):
	pass

class Format(namedtuple("Format", ["long_press", "short_press", "space"])):
	"""
	The three symbols a piece of morse text is written with
	"""
	__slots__ = ()

	def __new__(cls, long_press, short_press, space):
		for key in (long_press, short_press, space):
			if not isinstance(key, str) or len(key) != 1 or \
					key.isspace():
				raise FormatError("invalid morse key %r: "
						"expected a single visible "
						"character" % (key,))
		if len(set([ long_press, short_press, space ])) != 3:
			raise FormatError("morse keys must be distinct: "
					"'%s' '%s' '%s'" % (long_press,
						short_press, space))
		return super(Format, cls).__new__(cls, long_press, short_press,
				space)

	@classmethod
	def parse(cls, text):
		"""
		Build a format from a string like "-./" (long, short, space)
		"""
		if text is None or len(text) != 3:
			raise FormatError("a format needs exactly three keys: "
					"%r" % (text,))
		return cls(text[0], text[1], text[2])

	def is_key(self, key):
		return key == self.long_press or key == self.short_press or \
				key == self.space

	def __str__(self):
		return "".join(self)

CANONICAL_FORMAT = Format("-", ".", "/")
DEFAULT_FORMAT = CANONICAL_FORMAT

# order matters: on a shared code the first character wins when decoding
ALPHABET = [
	("a", ".-"), ("b", "-..."), ("c", "-.-."), ("d", "-.."), ("e", "."),
	("f", "..-."), ("g", "--."), ("h", "...."), ("i", ".."),
	("j", ".---"), ("k", "-.-"), ("l", ".-.."), ("m", "--"), ("n", "-."),
	("o", "---"), ("p", ".--."), ("q", "--.-"), ("r", ".-."),
	("s", "..."), ("t", "-"), ("u", "..-"), ("v", "...-"), ("w", ".--"),
	("x", "-..-"), ("y", "-.--"), ("z", "--.."),
	("0", "-----"), ("1", ".----"), ("2", "..---"), ("3", "...--"),
	("4", "....-"), ("5", "....."), ("6", "-...."), ("7", "--..."),
	("8", "---.."), ("9", "----."),
	(".", ".-.-.-"), (",", "--..--"), ("?", "..--.."), ("/", "-..-."),
	("(", "-.--."), (")", "-.--.-"), (":", "---..."), ("=", "-...-"),
	("+", ".-.-."), ("-", "-....-"), ("@", ".--.-."), ("'", ".----."),
	('"', ".-..-."), ("\\", "-..-."),
	(" ", "/"),
	# nonstandard
	("!", "-.-.--"), ("&", ".-..."), (";", "-.-.-."), ("_", "..--.-"),
	("$", "...-..-")]

def tokenize(text):
	"""
	Split morse text into letters; runs of whitespace separate letters
	"""
	return text.split()

def switch_format(text, old_fmt, new_fmt):
	"""
	Rewrite morse text from one set of keys to another. Characters which
	are not keys of old_fmt are copied as they are.
	"""
	if old_fmt == new_fmt:
		return text
	return text.translate(str.maketrans("".join(old_fmt),
			"".join(new_fmt)))

class KeyTable(object):
	def __init__(self, fmt=DEFAULT_FORMAT):
		self.format = fmt
		self.keys = { char: switch_format(code, CANONICAL_FORMAT, fmt)
				for (char, code) in ALPHABET }
		self.codes = {}
		for (char, code) in ALPHABET:
			self.codes.setdefault(self.keys[char], char)
		logger.debug("built key table for format '%s' (%d letters)",
				fmt, len(self.keys))

	def encode(self, text):
		"""
		Encode a string to morse code, unknown characters are skipped
		"""
		return " ".join([ self.keys[c] for c in text.lower()
				if c in self.keys ])

	def decode(self, morse):
		"""
		Decode a string containing morse code, unknown letters are
		skipped
		"""
		return "".join([ self.codes[token] for token in tokenize(morse)
				if token in self.codes ])

	def __repr__(self):
		return "KeyTable('%s')" % (self.format,)

tables = {}
def get_table(fmt=DEFAULT_FORMAT):
	if fmt in tables:
		return tables[fmt]
	tables[fmt] = KeyTable(fmt)
	return tables[fmt]

codes = {}
def valid_codes(fmt=DEFAULT_FORMAT):
	"""
	All letters that are valid morse code in the given format
	"""
	if fmt in codes:
		return codes[fmt]
	codes[fmt] = frozenset([ switch_format(code, CANONICAL_FORMAT, fmt)
			for (char, code) in ALPHABET ])
	return codes[fmt]

def encode(text, fmt=DEFAULT_FORMAT):
	return get_table(fmt).encode(text)

def decode(morse, fmt=DEFAULT_FORMAT):
	return get_table(fmt).decode(morse)
