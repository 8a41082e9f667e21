""" Decoding of JSON string literals, with blame for bad escapes pinned to the right character. """

import re

from ..support.interfaces import PositionedError

DEQUOTE = {'b': '\b', 'f': '\f', 'n': '\n', 'r': '\r', 't': '\t', '"': '"', '/': '/', '\\': '\\'}

# The first alternative catches an escaped UTF-16 surrogate pair, so it can become one code point.
ESCAPE = re.compile(r'\\u([dD][89abAB][0-9a-fA-F]{2})\\u([dD][c-fC-F][0-9a-fA-F]{2})|\\u([\s\S]{0,4})|\\([\s\S])')
HEX_DIGITS = re.compile(r'[0-9a-fA-F]{4}')

def dequote(literal:str, start:int=0) -> str:
	"""
	Strip the quotation marks and resolve the escapes. `start` is the offset of the
	opening quotation mark within the whole text, so that an error can say exactly
	where the offending backslash was.
	"""
	def replace(match:re.Match) -> str:
		high, low, hex_digits, ch = match.groups()
		if high is not None:
			return chr(0x10000 + ((int(high, 16) - 0xD800) << 10) + (int(low, 16) - 0xDC00))
		if hex_digits is not None:
			if HEX_DIGITS.fullmatch(hex_digits): return chr(int(hex_digits, 16))
		elif ch in DEQUOTE: return DEQUOTE[ch]
		raise PositionedError(start + 1 + match.start(), "Unexpected escape sequence: '%s'"%match.group())
	return ESCAPE.sub(replace, literal[1:-1])

ENQUOTE = {v: '\\'+k for k, v in DEQUOTE.items() if k != '/'}
NEEDS_ESCAPE = re.compile(r'["\\\x00-\x1f]')

def enquote(text:str) -> str:
	""" The other direction, so a string in an error message reads the way it would in JSON. """
	def replace(match:re.Match) -> str:
		ch = match.group()
		return ENQUOTE.get(ch) or '\\u%04x'%ord(ch)
	return '"%s"'%NEEDS_ESCAPE.sub(replace, text)
