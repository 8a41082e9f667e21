"""
JSON is JavaScript Object Notation. See http://www.json.org/ for more.
Python has a standard library for JSON, so this is just a worked example:
the token rules feed a `ValueBuilder`, which is a push-down automaton of frames.
"""

from ..scanning.engine import Definition
from .frames import ValueBuilder
from .strings import dequote

lexemes = Definition()

# Reserved words come before anything else could claim them.
reserved_words = {'null': None, 'true': True, 'false': False}
for word, value in reserved_words.items():
	lexemes.on(word)(lambda text, context, offset, value=value: context.add_value(value))

@lexemes.on(r'-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][-+]?\d+)?')
def number(text, context, offset):
	is_integer = not any(c in text for c in '.eE')
	return context.add_value(int(text) if is_integer else float(text))

@lexemes.on(r'"[^"\\]*(?:\\.[^"\\]*)*"')
def string(text, context, offset):
	return context.add_value(dequote(text, offset))

# Opening brackets push a new frame; closing brackets pop it again.
lexemes.on(r'\[')(lambda text, context, offset: context.open_array(offset))
lexemes.on(r'\{')(lambda text, context, offset: context.open_object(offset))
lexemes.on(r'\]')(lambda text, context, offset: context.close_array())
lexemes.on(r'\}')(lambda text, context, offset: context.close_object())

lexemes.on(',')(lambda text, context, offset: context.comma())
lexemes.on(':')(lambda text, context, offset: context.colon())

lexemes.ignore(r'\s+')

ENGINE = lexemes.engine()

def parse(text:str):
	""" Returns the value represented by `text`, or raises ParseFailure. """
	return ENGINE.parse(text, ValueBuilder(), finish=ValueBuilder.finalize)
