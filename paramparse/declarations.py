"""
The declaration phase: read `(type-flag variable-name)*` up to the separator,
resolving each name to an output binding as we go.
"""

from typing import NamedTuple, Optional

from . import bindings
from .interface import (
	ExpectedType, OutputBinding, TYPE_FLAGS, SEPARATOR, RESERVED_NAME,
	UnexpectedArgumentError, ReservedNameError, UndefinedVariableError,
	MissingSeparatorError, MissingArgumentsError,
)
from .stream import ArgumentStream

class Declaration(NamedTuple):
	kind: ExpectedType
	name: str
	binding: OutputBinding

def parse_declarations(stream:ArgumentStream, scope, *, context=None, reserved:Optional[str]=RESERVED_NAME) -> list[Declaration]:
	"""
	Consume declarations and the separator from the stream. On return, the stream
	is positioned at the first value token, and at least one such token exists.
	Pass `reserved=None` to permit every name.
	"""
	table = []
	while True:
		if not stream.has_more(): raise MissingSeparatorError(context, None)
		flag = stream.next()
		if flag == SEPARATOR: break
		try: kind = TYPE_FLAGS[flag]
		except KeyError: raise UnexpectedArgumentError(context, stream.left, flag) from None
		if not stream.has_more(): raise MissingSeparatorError(context, None)
		name = stream.next()
		if reserved is not None and name == reserved:
			raise ReservedNameError(context, stream.left, name)
		try: binding = bindings.resolve(scope, name)
		except bindings.NoSuchVariable: raise UndefinedVariableError(context, stream.left, name) from None
		table.append(Declaration(kind, name, binding))
	if not stream.has_more(): raise MissingArgumentsError(context, None)
	return table
