"""
A reader for simple INI files, to show off a grammar where the actions trade one
context object for another: each `[section]` header makes a fresh section the
active context, and the assignments that follow land in it.

Keys before the first header belong to the section named by `DEFAULT_SECTION`.
"""

from rexparse.scanning.engine import Definition
from rexparse.support.interfaces import PositionedError, GrammarViolation

DEFAULT_SECTION = ''

class Document:
	def __init__(self):
		self.sections = {}

	def open_section(self, name:str, offset:int) -> "Section":
		if name in self.sections: raise PositionedError(offset, "Duplicate section %r"%name)
		return Section(self, name)

	def result(self) -> dict:
		""" The implicit default section only counts if something went in it. """
		return {name:values for name, values in self.sections.items() if values or name != DEFAULT_SECTION}

class Section:
	def __init__(self, document:Document, name:str):
		self.document = document
		self.values = document.sections[name] = {}

	def assign(self, key:str, value:str) -> "Section":
		if key in self.values: raise GrammarViolation('Duplicate key %r'%key)
		self.values[key] = value
		return self

lexemes = Definition()
lexemes.ignore(r'[;#][^\r\n]*')
lexemes.ignore(r'\s+')

@lexemes.on(r'\[[^\]\r\n]*\]')
def header(text, context:Section, offset):
	return context.document.open_section(text[1:-1].strip(), offset)

@lexemes.on(r'[^=\s\[;#][^=\r\n]*=[^\r\n]*')
def assignment(text, context:Section, offset):
	key, value = text.split('=', 1)
	return context.assign(key.strip(), value.strip())

def parse(text:str) -> dict:
	document = Document()
	return lexemes.parse(text, Section(document, DEFAULT_SECTION), finish=lambda section: section.document.result())
