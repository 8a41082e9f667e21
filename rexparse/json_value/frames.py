"""
The JSON value assembler is a small push-down automaton.

Each level of nesting gets a frame: a finite-state machine which owns the partially-built
collection for that level and knows which tokens are legal next. There are exactly three
kinds of frame: the root, an array, and an object. The `ValueBuilder` owns the stack of
frames and is the context the token engine carries from one action to the next.

Opening a bracket is a two-step affair: construct the new frame, then register its
(still empty) collection with the enclosing frame as an ordinary value, then push it.
Registration is where the enclosing frame gets to object. Closing a bracket asks the
active frame whether that's allowed here, and then pops it.
"""

from ..support.interfaces import PositionedError, GrammarViolation
from .strings import enquote

JSON_KIND = [
	(bool, 'boolean'), # Must precede `int`, since Python's booleans are integers.
	((int, float), 'number'),
	(str, 'string'),
	(list, 'array'),
	(dict, 'object'),
]

def kind_of(value) -> str:
	if value is None: return 'null'
	for types, kind in JSON_KIND:
		if isinstance(value, types): return kind
	raise TypeError("Not a JSON value: %r"%(value,))

def render(value) -> str:
	""" Approximately how the value looked in the text. """
	if value is None: return 'null'
	if isinstance(value, bool): return 'true' if value else 'false'
	if isinstance(value, str): return enquote(value)
	if isinstance(value, list): return '[...]' if value else '[]'
	if isinstance(value, dict): return '{...}' if value else '{}'
	return repr(value)

def unexpected_character(ch:str):
	raise GrammarViolation('Unexpected character: `%s`'%ch)

def unexpected_value(value):
	raise GrammarViolation('Unexpected %s: %s'%(kind_of(value), render(value)))


class Frame:
	"""
	The protocol of structural operations. Each either succeeds quietly or raises.
	The defaults here reject everything; each kind of frame allows what it must.
	"""
	def add_value(self, value): unexpected_value(value)
	def colon(self): unexpected_character(':')
	def comma(self): unexpected_character(',')
	def close_array(self): unexpected_character(']')
	def close_object(self): unexpected_character('}')
	def finalize(self): raise NotImplementedError(type(self))


class RootFrame(Frame):
	""" Accepts exactly one value, ever. Punctuation is never legal at the top level. """

	def __init__(self):
		self.value, self.is_set = None, False

	def add_value(self, value):
		if self.is_set: unexpected_value(value)
		self.value, self.is_set = value, True

	def finalize(self):
		if not self.is_set: raise GrammarViolation('Unexpected end')
		return self.value


class ArrayFrame(Frame):
	"""
	States:
		INITIAL: just after `[`
		VALUE: just after an element
		COMMA: just after the `,` separating elements
	`]` is legal from INITIAL or VALUE, so a trailing comma is not.
	"""

	def __init__(self, start:int):
		self.value = []
		self.start = start
		self.state = 'INITIAL'

	def add_value(self, value):
		if self.state not in ('INITIAL', 'COMMA'): unexpected_value(value)
		self.value.append(value)
		self.state = 'VALUE'

	def comma(self):
		if self.state != 'VALUE': unexpected_character(',')
		self.state = 'COMMA'

	def close_array(self):
		if self.state not in ('INITIAL', 'VALUE'): unexpected_character(']')

	def finalize(self): raise PositionedError(self.start, 'Unmatched `[`')


class ObjectFrame(Frame):
	"""
	States:
		INITIAL: just after `{`
		NAME: just after a member name (which must be a string)
		COLON: just after the `:` following the name
		VALUE: just after the member's value
		COMMA: just after the `,` separating members
	`}` is legal from INITIAL or VALUE.
	"""

	def __init__(self, start:int):
		self.value = {}
		self.start = start
		self.state = 'INITIAL'
		self.name = None

	def add_value(self, value):
		if self.state in ('INITIAL', 'COMMA'):
			if not isinstance(value, str) or self.name is not None: unexpected_value(value)
			self.name = value
			self.state = 'NAME'
		elif self.state == 'COLON':
			if not isinstance(self.name, str): unexpected_value(value)
			self.value[self.name] = value
			self.name = None
			self.state = 'VALUE'
		else: unexpected_value(value)

	def colon(self):
		if self.state != 'NAME': unexpected_character(':')
		self.state = 'COLON'

	def comma(self):
		if self.state != 'VALUE': unexpected_character(',')
		self.state = 'COMMA'

	def close_object(self):
		if self.state not in ('INITIAL', 'VALUE'): unexpected_character('}')

	def finalize(self): raise PositionedError(self.start, 'Unmatched `{`')


class ValueBuilder:
	"""
	Owns the stack of frames. The root frame is never popped, because the root
	frame refuses every closing bracket. Each method returns the builder itself,
	which is what the token engine wants back from an action.
	"""
	def __init__(self):
		self.frames = [RootFrame()]

	@property
	def active(self) -> Frame: return self.frames[-1]

	def depth(self): return len(self.frames) - 1

	def add_value(self, value):
		self.active.add_value(value)
		return self

	def push(self, frame):
		self.active.add_value(frame.value)
		self.frames.append(frame)
		return self

	def open_array(self, start:int): return self.push(ArrayFrame(start))
	def open_object(self, start:int): return self.push(ObjectFrame(start))

	def close_array(self):
		self.active.close_array()
		self.frames.pop()
		return self

	def close_object(self):
		self.active.close_object()
		self.frames.pop()
		return self

	def colon(self):
		self.active.colon()
		return self

	def comma(self):
		self.active.comma()
		return self

	def finalize(self):
		""" Only the root can finish; any other active frame complains of its unmatched bracket. """
		return self.active.finalize()
