"""
The value phase. Each declared type has its own little grammar for how many
tokens it eats and what it makes of them. The walk over the declaration table
is positional: the i-th tag must agree with the i-th declaration, full stop.

Writes happen as soon as each value is decoded. If step i fails, steps before i
stay written. There is no undo.
"""

import re
from typing import Callable, Optional

from .interface import (
	ExpectedType, TYPE_FLAGS, KEYS_FLAGS, VALUES_FLAGS,
	UnexpectedArgumentError, TypeMismatchError, InvalidIntegerError, MissingArgumentsError,
	MissingDictionaryKeysFlag, MissingDictionaryValuesFlag, UnbalancedKeyValueError,
)
from .stream import ArgumentStream
from .declarations import Declaration

DIGITS = re.compile(r'[0-9]+')

def _one_token(stream:ArgumentStream, context, what) -> str:
	if not stream.has_more(): raise MissingArgumentsError(context, None, what)
	return stream.next()

def consume_array(stream:ArgumentStream, context) -> list[str]:
	return stream.take_literals()

def consume_string(stream:ArgumentStream, context) -> str:
	return _one_token(stream, context, 'string value')

def consume_integer(stream:ArgumentStream, context) -> str:
	token = _one_token(stream, context, 'integer value')
	if not DIGITS.fullmatch(token): raise InvalidIntegerError(context, stream.left, token)
	return token

def consume_dictionary(stream:ArgumentStream, context) -> dict[str, str]:
	if stream.peek() not in KEYS_FLAGS: raise MissingDictionaryKeysFlag(context, stream.position())
	stream.next()
	keys = stream.take_literals()
	if stream.peek() not in VALUES_FLAGS: raise MissingDictionaryValuesFlag(context, stream.position())
	stream.next()
	values = stream.take_literals()
	if len(keys) != len(values): raise UnbalancedKeyValueError(context, stream.left, keys, values)
	# Later duplicates win, same as repeated assignment would.
	return dict(zip(keys, values))

GRAMMAR : dict[ExpectedType, Callable[[ArgumentStream, Optional[str]], object]] = {
	ExpectedType.ARRAY: consume_array,
	ExpectedType.STRING: consume_string,
	ExpectedType.INTEGER: consume_integer,
	ExpectedType.DICTIONARY: consume_dictionary,
}

def consume_values(stream:ArgumentStream, table:list[Declaration], *, context=None, echo=None) -> list:
	"""
	Decode value groups until the stream runs dry, binding each as it is finished.
	Arrays are also written as one space-separated line to `echo`, if one is given.
	Returns the values bound, in order. There may be fewer of them than declarations.
	"""
	bound = []
	while stream.has_more():
		tag = stream.next()
		try: kind = TYPE_FLAGS[tag]
		except KeyError: raise UnexpectedArgumentError(context, stream.left, tag) from None
		index = len(bound)
		expected = table[index].kind if index < len(table) else None
		if kind is not expected: raise TypeMismatchError(context, stream.left, expected, index, tag)
		value = GRAMMAR[kind](stream, context)
		if kind is ExpectedType.ARRAY and echo is not None: print(*value, file=echo)
		table[index].binding.assign(value)
		bound.append(value)
	return bound
