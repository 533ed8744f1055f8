# -*- coding: utf-8 -*-
# vim:set ts=8 sts=8 sw=8 tw=80 noet cc=80:

import pytest

from morse import DEFAULT_FORMAT, Format, encode
from repair import DEFAULT_MODE, DEFAULT_REPAIR_ORDER, RepairMode, \
		is_valid_morse, repair_letter, repair_morse, repair_order

NY = Format("N", "Y", "_")

def test_is_valid_morse():
	assert is_valid_morse("... --- ...")
	assert not is_valid_morse("...  ---  ..Z.")

def test_is_valid_morse_empty():
	assert is_valid_morse("")
	assert is_valid_morse("  \n ")

def test_is_valid_morse_space_key():
	assert is_valid_morse(".- / -...")
	assert not is_valid_morse(".- // -...")

def test_is_valid_morse_format():
	assert is_valid_morse("YN _ NYYY", NY)
	assert not is_valid_morse(".- -...", NY)

def test_encoded_text_is_valid():
	text = "The quick brown fox, 1234567890 (ok)?\n"
	assert is_valid_morse(encode(text))
	assert is_valid_morse(encode(text, NY), NY)

def test_remove_incorrect_letter():
	assert repair_morse(".- .-X -...") == ".- -..."
	assert repair_morse(".-X") == ""

def test_remove_incorrect_key():
	assert repair_morse(".-X", RepairMode.REMOVE_INCORRECT_KEY) == ".-"
	assert repair_morse("... -X-X- ...",
			RepairMode.REMOVE_INCORRECT_KEY) == "... --- ..."

def test_remove_incorrect_key_drops_unfixable():
	# six dots are no letter
	assert repair_morse("...x... -", RepairMode.REMOVE_INCORRECT_KEY) == "-"
	assert repair_morse("XYZ", RepairMode.REMOVE_INCORRECT_KEY) == ""

def test_replace_with_short_press():
	assert repair_morse(".-X",
			RepairMode.TRY_REPLACING_WITH_SHORT_PRESS) == ".-."
	assert repair_morse("..x..x..",
			RepairMode.TRY_REPLACING_WITH_SHORT_PRESS) == ""

def test_replace_with_long_press():
	assert repair_morse("-x-", RepairMode.TRY_REPLACING_WITH_LONG_PRESS) == \
			"---"
	assert repair_morse("-------x",
			RepairMode.TRY_REPLACING_WITH_LONG_PRESS) == ""

def test_ordered_repair_default_order():
	mode = RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE
	# removing the key works first
	assert repair_morse(".-X", mode) == ".-"
	# removing the key leaves "-----"
	assert repair_morse("-x----", mode) == "-----"
	assert repair_morse("......x", mode) == ""

def test_ordered_repair_tries_original_letter():
	mode = RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE
	order = repair_order([ RepairMode.TRY_REPLACING_WITH_SHORT_PRESS,
			RepairMode.TRY_REPLACING_WITH_LONG_PRESS ])
	# short press gives "......" (no letter), long press starts over
	# from "..x..." and gives "..-..." (no letter either)
	assert repair_morse("..x...", mode, order=order) == ""
	# short press: "x-" -> ".-"
	assert repair_morse("x-", mode, order=order) == ".-"
	order = repair_order([ RepairMode.TRY_REPLACING_WITH_LONG_PRESS,
			RepairMode.TRY_REPLACING_WITH_SHORT_PRESS ])
	assert repair_morse("x-", mode, order=order) == "--"

def test_ordered_repair_empty_order():
	mode = RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE
	assert repair_morse(".-X .-", mode, order=()) == ".-"

def test_repair_keeps_valid_text():
	text = "... --- ... / .-.-.-"
	for mode in RepairMode:
		assert repair_morse(text, mode) == text

def test_repair_normalizes_whitespace():
	assert repair_morse("  ...   ---\n... ") == "... --- ..."

def test_repair_other_format():
	assert repair_morse("YNX", RepairMode.REMOVE_INCORRECT_KEY, NY) == "YN"
	assert repair_morse("YX", RepairMode.TRY_REPLACING_WITH_LONG_PRESS,
			NY) == "YN"

@pytest.mark.parametrize("mode", list(RepairMode))
def test_repair_is_idempotent(mode):
	text = ".-X .. -x- ......x / ---- .-.-.- ?? -..-."
	once = repair_morse(text, mode)
	assert repair_morse(once, mode) == once
	assert is_valid_morse(once)

def test_repair_mode_by_name():
	assert repair_morse(".-X", "remove-incorrect-key") == ".-"
	assert repair_morse(".-X", 1) == ".-"

def test_repair_letter():
	assert repair_letter(".-") == ".-"
	assert repair_letter(".-X") is None
	assert repair_letter(".-X", RepairMode.REMOVE_INCORRECT_KEY) == ".-"

def test_repair_mode_parse():
	assert RepairMode.parse("remove_incorrect_key") == \
			RepairMode.REMOVE_INCORRECT_KEY
	assert RepairMode.parse("Try-Replacing-With-Long-Press") == \
			RepairMode.TRY_REPLACING_WITH_LONG_PRESS
	assert RepairMode.parse("4") == \
			RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE
	assert RepairMode.parse(RepairMode.REMOVE_INCORRECT_KEY) is \
			RepairMode.REMOVE_INCORRECT_KEY
	assert DEFAULT_MODE == RepairMode.REMOVE_INCORRECT_LETTER

@pytest.mark.parametrize("name", [ "nope", "9", "", "-1" ])
def test_repair_mode_parse_unknown(name):
	with pytest.raises(ValueError):
		RepairMode.parse(name)

def test_default_repair_order():
	assert DEFAULT_REPAIR_ORDER == (RepairMode.REMOVE_INCORRECT_KEY,
			RepairMode.TRY_REPLACING_WITH_SHORT_PRESS,
			RepairMode.TRY_REPLACING_WITH_LONG_PRESS)

def test_repair_order_dedup_and_filter():
	order = repair_order([ RepairMode.TRY_REPLACING_WITH_LONG_PRESS,
			RepairMode.REMOVE_INCORRECT_LETTER,
			RepairMode.TRY_REPLACING_WITH_LONG_PRESS,
			"remove-incorrect-key",
			RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE ])
	assert order == (RepairMode.TRY_REPLACING_WITH_LONG_PRESS,
			RepairMode.REMOVE_INCORRECT_KEY)
	assert isinstance(order, tuple)

def test_repair_order_is_not_shared():
	mode = RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE
	repair_order([ RepairMode.TRY_REPLACING_WITH_LONG_PRESS ])
	assert repair_morse("x-", mode) == "-"
	assert repair_morse("x-", mode, DEFAULT_FORMAT,
			DEFAULT_REPAIR_ORDER) == "-"

def test_repair_letter_unknown_mode():
	assert repair_letter(".-X", 9) is None
	assert repair_letter(".-", 9) == ".-"

def test_repair_order_by_name():
	mode = RepairMode.TRY_ORDERED_REPAIR_LIST_ONE_BY_ONE
	order = [ "try-replacing-with-long-press", "remove-incorrect-key" ]
	assert repair_morse("x-", mode, order=order) == "--"
	with pytest.raises(ValueError):
		repair_morse("x-", mode, order=[ "fix-it" ])
