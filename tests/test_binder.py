import contextlib
import io
import unittest
import warnings
import paramparse
from paramparse import binder

class Options:
	def __init__(self):
		self.mode = None
		self.paths = None

class TestBinder(unittest.TestCase):
	def setUp(self) -> None:
		self.binder = paramparse.Binder(echo=None)

	def test_result_and_scope(self):
		scope = {'names': [], 'greeting': None}
		result = self.binder.parse(scope, '-a', 'names', '-s', 'greeting', '--', '-a', 'Alice', 'Bob', '-s', 'Hello')
		self.assertEqual({'names': ['Alice', 'Bob'], 'greeting': 'Hello'}, result)
		self.assertEqual(result, scope)

	def test_slots(self):
		scope = paramparse.slots('count', 'lookup')
		self.binder.parse(scope, '-i', 'count', '-d', 'lookup', '--', '-i', '3', '-d', '-k', 'a', '-v', 'b')
		self.assertEqual('3', scope['count'].value)
		self.assertEqual({'a': 'b'}, scope['lookup'].value)

	def test_attribute_scope(self):
		options = Options()
		self.binder.parse(options, '-s', 'mode', '-a', 'paths', '--', '-s', 'fast', '-a', '/tmp', '\\-weird')
		self.assertEqual('fast', options.mode)
		self.assertEqual(['/tmp', '-weird'], options.paths)

	def test_each_call_is_independent(self):
		scope = {'x': None}
		self.binder.parse(scope, '-s', 'x', '--', '-s', 'one')
		with self.assertRaises(paramparse.MissingArgumentsError):
			self.binder.parse(scope, '-s', 'x', '--')
		self.assertEqual('one', scope['x'])

	def test_context_defaults_to_call_site(self):
		with self.assertRaises(paramparse.UndefinedVariableError) as cm:
			self.binder.parse({}, '-s', 'ghost', '--', '-s', 'boo')
		self.assertIn('test_binder.py:', cm.exception.context)
		self.assertIn('test_context_defaults_to_call_site', cm.exception.context)

	def test_explicit_context(self):
		with self.assertRaises(paramparse.TypeMismatchError) as cm:
			self.binder.parse({'x': None}, '-s', 'x', '--', '-i', '5', context='greet')
		self.assertEqual("Params: greet : expected string for argument 0, got -i", str(cm.exception))

	def test_echo_goes_to_stdout_by_default(self):
		out = io.StringIO()
		with contextlib.redirect_stdout(out):
			paramparse.Binder().parse({'x': None}, '-a', 'x', '--', '-a', 'p', 'q')
		self.assertEqual("p q\n", out.getvalue())

	def test_echo_can_be_redirected(self):
		out = io.StringIO()
		paramparse.Binder(echo=out).parse({'x': None}, '-a', 'x', '--', '-a', 'p')
		self.assertEqual("p\n", out.getvalue())

	def test_lenient_about_missing_values(self):
		scope = {'a': None, 'b': None}
		with warnings.catch_warnings(record=True) as caught:
			warnings.simplefilter('always')
			result = self.binder.parse(scope, '-s', 'a', '-s', 'b', '--', '-s', 'x')
		self.assertEqual({'a': 'x'}, result)
		self.assertIsNone(scope['b'])
		self.assertEqual(1, len(caught))
		self.assertIn('no values were passed for b', str(caught[0].message))

	def test_strict_about_missing_values(self):
		scope = {'a': None, 'b': None}
		strict = paramparse.Binder(echo=None, strict=True)
		with self.assertRaises(paramparse.MissingArgumentsError):
			strict.parse(scope, '-s', 'a', '-s', 'b', '--', '-s', 'x')
		self.assertEqual('x', scope['a'])

	def test_reserved_name_is_configurable(self):
		scope = {'var': None, 'it': None}
		with self.assertRaises(paramparse.ReservedNameError):
			self.binder.parse(scope, '-s', 'var', '--', '-s', 'x')
		paramparse.Binder(echo=None, reserved='it').parse(scope, '-s', 'var', '--', '-s', 'x')
		self.assertEqual('x', scope['var'])

	def test_exception_hook(self):
		class Forgiving(paramparse.Binder):
			def exception_binding(self, ex, command_line):
				return {'failed': type(ex).__name__}
		self.assertEqual({'failed': 'MissingSeparatorError'}, Forgiving().parse({}, '-s'))

	def test_all_errors_are_value_errors(self):
		with self.assertRaises(ValueError):
			self.binder.parse({}, '--foo')

	def test_success_path_does_not_quote_tokens(self):
		scope = {'n': None}
		self.binder.parse(scope, '-s', 'n', '--', '-s', 5)
		self.assertEqual(5, scope['n'])

	def test_verbose(self):
		out = io.StringIO()
		binder.VERBOSE = True
		try:
			with contextlib.redirect_stdout(out):
				self.binder.parse({'x': None}, '-s', 'x', '--', '-s', 'y')
		finally:
			binder.VERBOSE = False
		self.assertEqual("Params: 1 declared, 1 bound.\n", out.getvalue())

class TestTypicalBinder(unittest.TestCase):
	def test_complains_on_stderr(self):
		err = io.StringIO()
		with contextlib.redirect_stderr(err):
			with self.assertRaises(paramparse.InvalidIntegerError):
				paramparse.parse({'n': None}, '-i', 'n', '--', '-i', '-1', context='demo')
		lines = err.getvalue().splitlines()
		self.assertEqual("Params: demo: '-1' is not an integer.", lines[0])
		self.assertEqual(" >>> -i n -- -i -1", lines[1])
		self.assertEqual("                ^^ here", lines[2])

	def test_success_is_quiet(self):
		err = io.StringIO()
		scope = {'n': None}
		with contextlib.redirect_stderr(err):
			paramparse.parse(scope, '-i', 'n', '--', '-i', '10')
		self.assertEqual('', err.getvalue())
		self.assertEqual('10', scope['n'])


if __name__ == '__main__':
	unittest.main()
