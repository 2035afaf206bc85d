"""
Positional, typed argument binding: declare what you expect, then bind what you got.

	scope = {'names': [], 'greeting': None}
	parse(scope, '-a', 'names', '-s', 'greeting', '--', '-a', 'Alice', 'Bob', '-s', 'Hello')
"""

from .interface import (
	ExpectedType, OutputBinding, ParamsError,
	ReservedNameError, UndefinedVariableError, UnexpectedArgumentError,
	MissingArgumentsError, MissingSeparatorError, TypeMismatchError, InvalidIntegerError,
	MissingDictionaryKeysFlag, MissingDictionaryValuesFlag, UnbalancedKeyValueError,
)
from .bindings import Slot, slots
from .binder import Binder, TypicalBinder, parse
