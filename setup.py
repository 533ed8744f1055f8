#!/bin/python
# -*- coding: utf-8 -*-
# vim:set ts=8 sts=8 sw=8 tw=80 noet cc=80:

from setuptools import setup

setup(
	name             = "dahdit",
	version          = '1.0',
	description      = 'Morse code converter for any three symbols',
	long_description = 'Encodes and decodes morse code written with any'
	                   ' long press, short press and space keys, and'
	                   ' validates and repairs broken morse text',
	author           = 'root',
	platforms        = [ 'any' ],
	py_modules       = [ 'morse', 'repair', 'converter', 'dahdit' ],
	install_requires = [],
	extras_require   = { 'test': [ 'pytest' ] },
	entry_points     = { 'console_scripts': [ 'dahdit = dahdit:main' ] },
)
