"""
This module is all about easing over the process to display where things go wrong.

The scanner and the scan actions deal only in integer offsets from the start of
the text. That's as much location data as you get while scanning, and it's plenty:
line-breaking is kept separate from scanning, and only happens after something has
already gone wrong. At that point, the `SourceText` converts an offset into a row,
a column, and the text of the line, and `illustration` makes a picture of it.

There is just one complication:

Line breaks are a funny thing. Unix calls for \n. Apple prior to OSx called for \r.
CP/M and its derivatives like Windows call for \r\n, really a printer control sequence.
The Unicode line-breaking algorithm calls for several more.

The default treats the Unix, Apple, and DOS conventions as line-breaks, which is
what most applications do. But you can supply a mode argument to specify different
line-ending conventions. The options are given symbolically as keys in the
LINEBREAK_MODE dictionary.
"""

import bisect, re
from typing import NamedTuple

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unicode': re.compile(r'\r\n|[\x0a-\x0d\x1c-\x1e\u0085\u2028\u2029]'),
	'unix': re.compile(r'\n'),
	'apple': re.compile(r'\r'),
	'dos': re.compile(r'\r\n'),
}

class Location(NamedTuple):
	row: int
	column: int
	line: str

def illustration(single_line:str, column:int) -> str:
	""" Builds up a picture of where something appears in a line of text. Tabs stay tabs so the caret lines up. """
	blanks = ''.join(c if c == '\t' else ' ' for c in single_line[:column])
	return single_line + '\n' + blanks + '^'

class SourceText:
	""" Wrapper for (a section of) source text: participates in half-respectable error-display with context. """
	def __init__(self, content:str, line_breaks='normal', first_line=1):
		self.content = content
		self.line_breaks = line_breaks
		self.first_line = first_line
		self.__bounds = None
		self.__stops = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			breaks = list(LINEBREAK_MODE[self.line_breaks].finditer(self.content))
			self.__bounds = [0] + [m.end() for m in breaks] + [len(self.content)]
			self.__stops = [m.start() for m in breaks] + [len(self.content)]

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. Respects self.first_line. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		col = index - self.__bounds[row]
		return row+self.first_line, col

	def line_of_text(self, row) -> str:
		""" Argument respects self.first_line. The line terminator is not included. """
		self.__make_bounds()
		r = max(0, row - self.first_line)
		return self.content[self.__bounds[r]:self.__stops[r]]

	def locate(self, index:int) -> Location:
		row, col = self.find_row_col(index)
		return Location(row, col, self.line_of_text(row))

	def diagnostic(self, index:int, description:str) -> tuple[str, Location]:
		"""
		Format a message in the standard style: The description, then the line number
		(unless the whole text is one line), then the offending line with a caret under
		the spot. Returns the message along with the location it describes.
		"""
		where = self.locate(index)
		marker = '' if len(where.line) == len(self.content) else ' (line: %d)'%where.row
		return "%s%s\n%s"%(description, marker, illustration(where.line, where.column)), where

def locate(content:str, index:int, line_breaks='normal') -> Location:
	""" Convenience for the one-off case. """
	return SourceText(content, line_breaks).locate(index)
