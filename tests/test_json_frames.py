import unittest
from rexparse.json_value import frames
from rexparse.support.interfaces import GrammarViolation, PositionedError


class TestKinds(unittest.TestCase):
	def test_kind_of(self):
		for value, kind in [(None, 'null'), (True, 'boolean'), (0, 'number'), (1.5, 'number'), ('', 'string'), ([], 'array'), ({}, 'object')]:
			with self.subTest(value=value): self.assertEqual(kind, frames.kind_of(value))
		with self.assertRaises(TypeError): frames.kind_of(object())

	def test_render(self):
		self.assertEqual('false', frames.render(False))
		self.assertEqual('"abc"', frames.render('abc'))
		self.assertEqual('[]', frames.render([]))
		self.assertEqual('{...}', frames.render({'a': 1}))

	def test_render_escapes_strings(self):
		for value, shown in [('say "hi"', r'"say \"hi\""'), ('a\nb', r'"a\nb"'), ('back\\slash', r'"back\\slash"'), ('\x01/', r'"\u0001/"')]:
			with self.subTest(value=value): self.assertEqual(shown, frames.render(value))


class TestRootFrame(unittest.TestCase):
	def test_00_one_value_only(self):
		root = frames.RootFrame()
		root.add_value(None)
		with self.assertRaises(GrammarViolation) as cm:
			root.add_value(2)
		self.assertEqual('Unexpected number: 2', str(cm.exception))
		self.assertIsNone(root.finalize())

	def test_01_nothing_to_finalize(self):
		with self.assertRaises(GrammarViolation) as cm:
			frames.RootFrame().finalize()
		self.assertEqual('Unexpected end', str(cm.exception))

	def test_02_punctuation_is_never_legal(self):
		root = frames.RootFrame()
		for op in (root.colon, root.comma, root.close_array, root.close_object):
			with self.subTest(op=op.__name__):
				with self.assertRaises(GrammarViolation): op()


class TestArrayFrame(unittest.TestCase):
	def test_00_happy_path(self):
		a = frames.ArrayFrame(7)
		a.add_value(1)
		a.comma()
		a.add_value('x')
		a.close_array()
		self.assertEqual([1, 'x'], a.value)

	def test_01_empty_array_closes(self):
		frames.ArrayFrame(0).close_array()

	def test_02_illegal_transitions(self):
		a = frames.ArrayFrame(0)
		self.assertRaises(GrammarViolation, a.comma)
		a.add_value(1)
		self.assertRaises(GrammarViolation, a.add_value, 2)
		a.comma()
		self.assertRaises(GrammarViolation, a.close_array)
		self.assertRaises(GrammarViolation, a.comma)
		self.assertRaises(GrammarViolation, a.colon)
		self.assertRaises(GrammarViolation, a.close_object)

	def test_03_unmatched(self):
		with self.assertRaises(PositionedError) as cm:
			frames.ArrayFrame(7).finalize()
		self.assertEqual(7, cm.exception.position)
		self.assertEqual('Unmatched `[`', str(cm.exception))


class TestObjectFrame(unittest.TestCase):
	def test_00_happy_path(self):
		o = frames.ObjectFrame(0)
		o.add_value('a')
		o.colon()
		o.add_value(1)
		o.comma()
		o.add_value('b')
		o.colon()
		o.add_value([])
		o.close_object()
		self.assertEqual({'a': 1, 'b': []}, o.value)
		self.assertIsNone(o.name)

	def test_01_names_must_be_strings(self):
		with self.assertRaises(GrammarViolation) as cm:
			frames.ObjectFrame(0).add_value(1)
		self.assertEqual('Unexpected number: 1', str(cm.exception))

	def test_02_illegal_transitions(self):
		o = frames.ObjectFrame(0)
		self.assertRaises(GrammarViolation, o.colon)
		self.assertRaises(GrammarViolation, o.comma)
		o.add_value('a')
		self.assertRaises(GrammarViolation, o.add_value, 'b')
		self.assertRaises(GrammarViolation, o.close_object)
		o.colon()
		self.assertRaises(GrammarViolation, o.close_object)
		o.add_value(True)
		self.assertRaises(GrammarViolation, o.add_value, None)
		self.assertRaises(GrammarViolation, o.colon)
		with self.assertRaises(GrammarViolation) as cm:
			o.close_array()
		self.assertEqual('Unexpected character: `]`', str(cm.exception))

	def test_03_unmatched(self):
		with self.assertRaises(PositionedError) as cm:
			frames.ObjectFrame(3).finalize()
		self.assertEqual(3, cm.exception.position)
		self.assertEqual('Unmatched `{`', str(cm.exception))


class TestValueBuilder(unittest.TestCase):
	def test_00_nesting(self):
		b = frames.ValueBuilder()
		self.assertIs(b, b.open_array(0))
		b.open_object(1)
		self.assertEqual(2, b.depth())
		b.add_value('k').colon().add_value(None).close_object()
		b.close_array()
		self.assertEqual(0, b.depth())
		self.assertEqual([{'k': None}], b.finalize())

	def test_01_registration_happens_before_push(self):
		b = frames.ValueBuilder()
		b.add_value(1)
		with self.assertRaises(GrammarViolation) as cm:
			b.open_array(2)
		self.assertEqual('Unexpected array: []', str(cm.exception))
		self.assertEqual(0, b.depth())

	def test_02_finalize_blames_innermost_bracket(self):
		b = frames.ValueBuilder().open_array(0).open_object(1)
		with self.assertRaises(PositionedError) as cm:
			b.finalize()
		self.assertEqual(1, cm.exception.position)


if __name__ == '__main__':
	unittest.main()
