"""
This file aggregates the exception types which rexparse deals in, along with the
shape of a scan action.

There are two kinds of trouble a grammar can report:

* Something is wrong at a known place in the text: an unmatched bracket, a bad
  escape sequence, a character no rule recognizes. That is a `PositionedError`.
* Something is wrong with the token just seen, given the state of the context:
  a comma where a value belongs, say. The action neither knows nor cares where
  it is in the text, so it raises a `GrammarViolation` and the engine fills in
  the position of the match it was processing.

Either way the engine converts the problem into a `ParseFailure` which knows the
row, column, and text of the offending line. A broken rule table is a different
matter entirely: that's a bug, not a grammar error, so it gets `InternalError`.
"""

import sys
from typing import Callable, Any

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """

class PositionedError(LanguageError):
	"""
	Raise this from a scan action if you know exactly where in the text
	the problem lies. Parameters are:
		the string offset where it happened.
		a description of the problem.
	"""
	def __init__(self, position:int, message:str):
		super().__init__(message)
		self.position, self.message = position, message

	def __str__(self): return self.message

class ScannerBlocked(PositionedError):
	""" Raised if no rule can match at the offset where scanning stopped. """
	def __init__(self, position:int):
		super().__init__(position, 'Unrecognized token')

class GrammarViolation(LanguageError):
	""" The token is fine by itself, but not in the present state of the context. """

class ParseFailure(LanguageError):
	"""
	What finally comes out of a failed parse. The message is the description
	decorated with the location and a picture of the offending line; the parts
	are also available as attributes for anyone who wants to do better.
	"""
	def __init__(self, message:str, *, description:str, position:int, row:int, column:int, line:str):
		super().__init__(message)
		self.description = description
		self.position = position
		self.row, self.column, self.line = row, column, line

	def emit(self):
		""" Print to standard error the generated error text. """
		print(self.args[0], file=sys.stderr)

class InternalError(AssertionError):
	""" The rule table is inconsistent. This should never happen to a properly constructed engine. """

"""
The Scan Action Interface is just a function:
	action(matched_text, context, offset) -> context
Return the same context to carry on with it, or a different one to make that the active context.
"""
ScanAction = Callable[[str, Any, int], Any]
