"""
The scanner is the sequential-match primitive: given a compiled pattern and a text,
it produces successive matches anchored at strictly increasing offsets.

It knows nothing about rules or actions. What it does know is where it is:
`position` is how far scanning has got, and `current` is the start of the match
the caller is presently working on. If iteration ends with `position` short of the
end of the text, then the scanner got stuck.
"""

import re
from typing import Iterator, Optional

class Scanner:

	current : Optional[int]

	def __init__(self, pattern:re.Pattern, text:str, at=0):
		self.__pattern = pattern
		self.__text = text
		self.__size = len(text)
		self.position = at
		self.current = None

	def __iter__(self) -> Iterator[re.Match]:
		while self.has_more():
			match = self.__pattern.match(self.__text, self.position)
			# A zero-width match makes no progress, so it counts as being stuck.
			if match is None or match.end() == self.position: break
			self.current, self.position = match.start(), match.end()
			yield match
		self.current = None

	def has_more(self):
		return self.position < self.__size

	def is_blocked(self):
		""" Meaningful once iteration is finished. """
		return self.current is None and self.has_more()
