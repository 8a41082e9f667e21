"""
The token engine hooks an ordered list of regular-expression patterns up to actions,
and drives a context object through the actions as the patterns match the text.

This is how the magic happens: Each rule's pattern gets wrapped in a uniquely-named
group, and the groups are joined into one big alternation. Python's `re` tries the
alternatives of an alternation in order and takes the first that matches, so the
first rule (in declaration order) capable of matching at the current offset wins.
This is deliberately NOT the longest-match heuristic of conventional scanner
generators: if two rules can match at the same place, put the one you want first.

The engine itself keeps no stack and does no recursion. Whatever nesting structure
a grammar has belongs to the context: an action gets the active context and returns
the context to use next, which may or may not be the same object.
"""

import re, sys
from typing import Iterable, Optional, Callable, Any

from ..support.interfaces import ScanAction, LanguageError, PositionedError, ScannerBlocked, ParseFailure, InternalError
from ..support.failureprone import SourceText
from .scanner import Scanner

VERBOSE = False

# Flags which may be scoped to a single alternative; the rest apply to a whole pattern.
_SCOPED_FLAGS = {re.IGNORECASE:'i', re.MULTILINE:'m', re.DOTALL:'s', re.VERBOSE:'x', re.ASCII:'a'}

# Global flags are only legal at the very start of a whole expression, so they become scoped.
_LEADING_FLAGS = re.compile(r'\(\?([aiLmsux]+)\)')

# Each rule lives inside its own group, which throws off the numbering of any groups it has.
_NUMBERED_BACKREFERENCE = re.compile(r'(?<!\\)(?:\\\\)*\\(?:[1-7](?![0-7]{2})|[89])')

def _scoped(letters:str, source:str) -> str:
	if not letters: return source
	# In verbose mode, a comment runs to the end of the line: it must not swallow the close.
	if 'x' in letters: return '(?%s:%s\n)'%(letters, source)
	return '(?%s:%s)'%(letters, source)

def _source_of(pattern) -> str:
	if isinstance(pattern, re.Pattern):
		if not isinstance(pattern.pattern, str): raise TypeError("Only text patterns are supported.", pattern)
		source = pattern.pattern
		letters = ''.join(letter for flag, letter in _SCOPED_FLAGS.items() if pattern.flags & flag)
	elif isinstance(pattern, str): source, letters = pattern, ''
	else: raise TypeError(type(pattern))
	while True:
		match = _LEADING_FLAGS.match(source)
		if match is None: break
		letters += ''.join(letter for letter in match.group(1) if letter not in letters)
		source = source[match.end():]
	if _NUMBERED_BACKREFERENCE.search(source):
		raise ValueError("Use a named backreference, like (?P=name), in a token rule.", pattern)
	return _scoped(letters, source)

def group_name(rule_id:int) -> str:
	return 'rule_%d' % rule_id

class TokenEngine:
	"""
	An immutable, compiled table of (pattern, action) rules. Once built, an engine
	may be shared freely, even among threads, so long as each parse gets its own context.
	"""
	def __init__(self, rules:Iterable[tuple[Any, ScanAction]], *, line_breaks='normal'):
		patterns, actions = [], {}
		for rule_id, (pattern, action) in enumerate(rules):
			assert callable(action), (pattern, action)
			name = group_name(rule_id)
			patterns.append('(?P<%s>%s)'%(name, _source_of(pattern)))
			actions[name] = action
		if not patterns: raise ValueError("A token engine needs at least one rule.")
		self.__pattern = re.compile('|'.join(patterns))
		self.__actions = actions
		self.__line_breaks = line_breaks
		if VERBOSE:
			for source in patterns: print(source, file=sys.stderr)

	@property
	def pattern(self) -> re.Pattern: return self.__pattern

	def action_for(self, match:re.Match) -> ScanAction:
		""" Exactly one of the outer groups participates in any match, and it closes last. """
		name = match.lastgroup
		try: return self.__actions[name]
		except KeyError: raise InternalError("Rule %r matched but has no action bound to it."%name) from None

	def parse(self, content:str, context, *, finish:Optional[Callable[[Any], Any]]=None):
		"""
		Scan the whole of `content`, threading `context` through the actions of the rules
		that match. If `finish` is supplied, it gets called with the final context (and its
		problems are reported the same way as any others); its result is the result of the
		parse. Otherwise the result is the final context.

		Any LanguageError raised along the way aborts the parse and comes out the far end
		as a ParseFailure which knows where the trouble happened.
		"""
		scanner = Scanner(self.__pattern, content)
		try:
			for match in scanner:
				context = self.action_for(match)(match.group(), context, match.start())
			if scanner.is_blocked(): raise ScannerBlocked(scanner.position)
			return context if finish is None else finish(context)
		except LanguageError as ex:
			raise self.failure(content, ex, scanner) from ex

	def failure(self, content:str, ex:LanguageError, scanner:Scanner) -> ParseFailure:
		"""
		The error's own position is best. Failing that, blame the match being processed.
		If there isn't one, the problem must have turned up at the end of the text.
		"""
		if isinstance(ex, PositionedError): position = ex.position
		elif scanner.current is not None: position = scanner.current
		else: position = len(content)
		description = str(ex)
		message, where = SourceText(content, self.__line_breaks).diagnostic(position, description)
		return ParseFailure(message, description=description, position=position, row=where.row, column=where.column, line=where.line)


class Definition:
	"""
	Accumulate rules one at a time, in priority order, then call `engine()`.
	For instance:
		lexemes = Definition()
		lexemes.ignore(r'\\s+')
		@lexemes.on(r'[A-Za-z_]+')
		def word(text, context, offset): ...
	"""
	def __init__(self, *, line_breaks='normal'):
		self.__rules = []
		self.__engine = None
		self.__line_breaks = line_breaks
		self.__awaiting_action = False

	def on(self, pattern):
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the previous pattern!')
		if self.__engine is not None: raise AssertionError('The engine is already built; it is too late to add rules.')
		_source_of(pattern)  # Fail early on nonsense.
		self.__awaiting_action = True
		def decorator(fn):
			assert self.__awaiting_action
			self.__awaiting_action = False
			assert callable(fn)
			self.__rules.append((pattern, fn))
			return fn
		return decorator

	def ignore(self, pattern):
		""" Tell the engine to skip what matches the pattern. """
		@self.on(pattern)
		def action(text, context, offset): return context

	def rules(self) -> list:
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the final pattern!')
		return list(self.__rules)

	def engine(self) -> TokenEngine:
		if self.__engine is None:
			self.__engine = TokenEngine(self.rules(), line_breaks=self.__line_breaks)
		return self.__engine

	def parse(self, content:str, context, *, finish=None):
		return self.engine().parse(content, context, finish=finish)
