#!/bin/python
# -*- coding: utf-8 -*-
# vim:set ts=8 sts=8 sw=8 tw=80 noet cc=80:

import sys
import os
import configparser
import logging
from optparse import OptionParser

from morse import DEFAULT_FORMAT, Format, switch_format
from repair import DEFAULT_MODE, DEFAULT_REPAIR_ORDER, RepairMode
from converter import Converter, read_file

logger = logging.getLogger(__name__)

ENCODE = "encode"
DECODE = "decode"
CHECK = "check"
REPAIR = "repair"
SWITCH = "switch"

def config_files(extra=None):
	xdg_dirs = os.getenv('XDG_CONFIG_HOME', os.path.expanduser("~/.config"))
	filenames = [ "/etc/dahdit.conf", os.path.expanduser("~/.dahditrc") ]
	for xdg_dir in xdg_dirs.split(":"):
		filenames += [ "%s/dahdit.conf" % xdg_dir ]
	filenames += [ "dahdit.conf" ]
	if extra is not None:
		filenames += [ extra ]
	return filenames

def get_parser():
	parser = OptionParser(usage="%prog [options] [text... | files...]")
	parser.add_option("-f", "--file", dest="file", help="Config file path")
	parser.add_option("-e", "--encode", dest="action", action="store_const",
			const=ENCODE, help="Encode text to morse (default)")
	parser.add_option("-d", "--decode", dest="action", action="store_const",
			const=DECODE, help="Decode morse to text")
	parser.add_option("-c", "--check", dest="action", action="store_const",
			const=CHECK, help="Check if the input is valid morse")
	parser.add_option("-r", "--repair", dest="action", action="store_const",
			const=REPAIR, help="Repair broken morse")
	parser.add_option("-m", "--mode", dest="mode",
			help="Repair mode used with -r")
	parser.add_option("-t", "--to", dest="to",
			help="Rewrite morse into this format (e.g. \"NY_\")")
	parser.add_option("-i", "--input", dest="input", action="store_true",
			default=False, help="Treat arguments as files")
	parser.add_option("-k", "--keys", dest="keys",
			help="Morse format: long, short and space key")
	parser.add_option("-l", "--long", dest="long_press",
			help="Long press key")
	parser.add_option("-s", "--short", dest="short_press",
			help="Short press key")
	parser.add_option("-w", "--space", dest="space", help="Space key")
	parser.add_option("-o", "--order", dest="order",
			help="Comma separated repair order")
	parser.add_option("-v", "--verbose", dest="verbose",
			action="store_true", default=False,
			help="Enable debug output")
	return parser

def load_config(options):
	config = configparser.ConfigParser(interpolation=None)
	cfgfiles = config.read(config_files(options.file))
	logger.debug("read config files: %s", ", ".join(cfgfiles))

	for section in [ "format", "repair" ]:
		if not config.has_section(section):
			config.add_section(section)

	if options.keys is not None:
		config.set("format", "keys", options.keys)
	if options.long_press is not None:
		config.set("format", "long_press", options.long_press)
	if options.short_press is not None:
		config.set("format", "short_press", options.short_press)
	if options.space is not None:
		config.set("format", "space", options.space)
	if options.mode is not None:
		config.set("repair", "mode", options.mode)
	if options.order is not None:
		config.set("repair", "order", options.order)
	return config

def get_format(config):
	keys = config.get("format", "keys", fallback=None)
	fmt = DEFAULT_FORMAT if keys is None else Format.parse(keys)
	return Format(config.get("format", "long_press",
				fallback=fmt.long_press),
			config.get("format", "short_press",
				fallback=fmt.short_press),
			config.get("format", "space", fallback=fmt.space))

def get_order(config):
	order = config.get("repair", "order", fallback=None)
	if order is None:
		return DEFAULT_REPAIR_ORDER
	return [ RepairMode.parse(mode) for mode in order.split(",")
			if len(mode.strip()) > 0 ]

def get_input(options, args):
	if options.input:
		return "\n".join([ read_file(path) for path in args ])
	if len(args) > 0:
		return " ".join(args)
	return sys.stdin.read()

def run(options, args):
	config = load_config(options)
	converter = Converter(get_format(config), get_order(config))
	mode = config.get("repair", "mode", fallback=None)

	action = options.action
	if options.to is not None:
		action = SWITCH
	elif action is None:
		action = ENCODE

	if action == ENCODE and options.input:
		print("\n".join([ converter.encode_file(path)
			for path in args ]))
		return 0
	if action == DECODE and options.input:
		print("\n".join([ converter.decode_file(path)
			for path in args ]))
		return 0

	text = get_input(options, args)
	if action == ENCODE:
		print(converter.encode(text))
	elif action == DECODE:
		print(converter.decode(text))
	elif action == CHECK:
		valid = converter.is_valid(text)
		print("valid" if valid else "invalid")
		return 0 if valid else 1
	elif action == REPAIR:
		mode = DEFAULT_MODE if mode is None else RepairMode.parse(mode)
		print(converter.repair(text, mode))
	elif action == SWITCH:
		print(switch_format(text, converter.format,
			Format.parse(options.to)))
	return 0

def main(argv=None):
	logging.basicConfig(level=logging.ERROR,
		                        format="%(levelname)-8s %(message)s")

	parser = get_parser()
	(options, args) = parser.parse_args(argv)
	if options.verbose:
		logging.getLogger().setLevel(logging.DEBUG)

	try:
		return run(options, args)
	except OSError as e:
		print("error: %s" % e, file=sys.stderr)
		return 1
	except ValueError as e:
		print("error: %s" % e, file=sys.stderr)
		return 2

if __name__ == "__main__":
	sys.exit(main())
