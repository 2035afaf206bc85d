"""
This file aggregates the vocabulary which the binder deals in: the expected types,
the flag spellings that denote them, the notion of an output binding, and the
exception types raised when a token stream does not hold up its end of the bargain.

Every exception here carries two attributes besides its particulars:

	context: a string describing the call site, or None if nobody cared to say.
	position: the index of the offending token within the complete token list,
		or None if the trouble is that the tokens ran out.

The position is enough for `failureprone` to draw a picture of where things went wrong.
"""

from enum import Enum

class ExpectedType(Enum):
	ARRAY = 'array'
	STRING = 'string'
	INTEGER = 'integer'
	DICTIONARY = 'dictionary'

TYPE_FLAGS = {
	'-a': ExpectedType.ARRAY, '--array': ExpectedType.ARRAY,
	'-s': ExpectedType.STRING, '--string': ExpectedType.STRING,
	'-i': ExpectedType.INTEGER, '--int': ExpectedType.INTEGER,
	'-d': ExpectedType.DICTIONARY, '--dictionary': ExpectedType.DICTIONARY,
}
KEYS_FLAGS = frozenset(['-k', '--keys'])
VALUES_FLAGS = frozenset(['-v', '--values'])
SEPARATOR = '--'
RESERVED_NAME = 'var' # Reserved for compatibility with scripts written against the shell version; Binder(reserved=None) lifts it.

class OutputBinding:
	"""
	An assignable handle. The caller owns it, allocates it before the call,
	and keeps it afterward. The binder only ever writes through it.
	"""
	def assign(self, value): raise NotImplementedError(type(self), 'store the decoded value wherever this handle points.')


def _prefix(context) -> str:
	return "Params: " if context is None else "Params: %s: "%context

class ParamsError(ValueError):
	""" Base class of all exceptions arising from the binder. """
	def __init__(self, context, position, *details):
		super().__init__(context, position, *details)
		self.context, self.position = context, position

	def describe(self) -> str:
		raise NotImplementedError(type(self))

	def __str__(self): return self.describe()

class ReservedNameError(ParamsError):
	def __init__(self, context, position, name):
		super().__init__(context, position, name)
		self.name = name
	def describe(self):
		return _prefix(self.context)+"variables can not be named %r when using paramparse.parse. Please use a different name."%self.name

class UndefinedVariableError(ParamsError):
	def __init__(self, context, position, name):
		super().__init__(context, position, name)
		self.name = name
	def describe(self):
		return _prefix(self.context)+"variable %s is not defined. Please define it before calling paramparse.parse."%self.name

class UnexpectedArgumentError(ParamsError):
	def __init__(self, context, position, argument):
		super().__init__(context, position, argument)
		self.argument = argument
	def describe(self):
		return _prefix(self.context)+"Unexpected argument: %r"%self.argument

class MissingArgumentsError(ParamsError):
	""" Either nothing at all followed the separator, or a value-bearing flag came last. """
	def __init__(self, context, position, what="parameters"):
		super().__init__(context, position, what)
		self.what = what
	def describe(self):
		return _prefix(self.context)+"No %s were passed to parse."%self.what

class MissingSeparatorError(ParamsError):
	def describe(self):
		return _prefix(self.context)+"declarations must be terminated by %r before the values."%SEPARATOR

class TypeMismatchError(ParamsError):
	"""
	`expected` is None when the value stream offers more groups than were declared.
	"""
	def __init__(self, context, position, expected, index, tag):
		super().__init__(context, position, expected, index, tag)
		self.expected, self.index, self.tag = expected, index, tag
	def describe(self):
		name = 'nothing' if self.expected is None else self.expected.value
		where = "Params: " if self.context is None else "Params: %s : "%self.context
		return where+"expected %s for argument %d, got %s"%(name, self.index, self.tag)

class InvalidIntegerError(ParamsError):
	def __init__(self, context, position, token):
		super().__init__(context, position, token)
		self.token = token
	def describe(self):
		return _prefix(self.context)+"%r is not an integer."%self.token

class MissingDictionaryKeysFlag(ParamsError):
	def describe(self):
		return _prefix(self.context)+'dictionary expected "keys" flag "-k" or "--keys".'

class MissingDictionaryValuesFlag(ParamsError):
	def describe(self):
		return _prefix(self.context)+'dictionary expected values flag "-v" or "--values" after keys flag.'

class UnbalancedKeyValueError(ParamsError):
	def __init__(self, context, position, keys, values):
		super().__init__(context, position, keys, values)
		self.keys, self.values = keys, values
	def describe(self):
		return "%sUnbalanced set of keys and values. Got %d keys and %d values.\nKeys: %s values: %s"%(
			_prefix(self.context), len(self.keys), len(self.values),
			''.join(k+', ' for k in self.keys), ''.join(v+', ' for v in self.values),
		)
