"""
This module ties the two phases together and supplies a (maybe) convenient
interface to the most common use case, which looks something like:

	def greet(*args):
		scope = {'names': [], 'greeting': None}
		paramparse.parse(scope, '--array', 'names', '--string', 'greeting', '--', *args)
		...

	greet('--array', 'Alice', 'Bob', '--string', 'Hello')

Configuration is by keyword argument on the Binder:

	echo: where decoded arrays get written as a side effect.
		True (the default) means whatever `sys.stdout` is at the time; None or False turns it off.
	reserved: the one name nobody may declare, or None to allow every name.
	strict: if true, running out of values before running out of declarations is an error.
		Otherwise it draws a warning, and the leftover outputs are simply not written.

Set VERBOSE to get a line of progress on STDOUT per call.
"""

import inspect, os, sys, warnings
from typing import Optional

from .interface import RESERVED_NAME, ParamsError, MissingArgumentsError
from .stream import ArgumentStream
from .declarations import parse_declarations
from .values import consume_values
from .failureprone import CommandLine

VERBOSE = False

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

def call_site() -> Optional[str]:
	""" Describe the nearest stack frame that is not inside this package, like bash's `caller`. """
	frame = inspect.currentframe()
	try:
		while frame is not None:
			filename = frame.f_code.co_filename
			if os.path.dirname(os.path.abspath(filename)) != _PACKAGE_DIR:
				return "%s:%d in %s"%(filename, frame.f_lineno, frame.f_code.co_name)
			frame = frame.f_back
		return None
	finally:
		del frame


class Binder:
	"""
	One Binder may serve any number of calls; it holds only configuration.
	Every call builds its own declaration table and argument stream.
	"""

	def __init__(self, *, echo=True, reserved:Optional[str]=RESERVED_NAME, strict=False):
		self.__echo = echo
		self.reserved = reserved
		self.strict = strict

	def echo_stream(self):
		if self.__echo is True: return sys.stdout
		return self.__echo or None

	def parse(self, scope, *tokens, context:Optional[str]=None) -> dict:
		"""
		Bind values from `tokens` into outputs found in `scope`.
		Tokens are normally strings, as they would arrive from a command line.
		Only the value after a string flag is passed along untouched, whatever it is.
		Returns a dictionary from name to value of everything bound, in declaration order.
		Raises some subclass of ParamsError at the first sign of trouble.
		"""
		if context is None: context = call_site()
		command_line = CommandLine(tokens)
		try: return self._bind(scope, command_line, context)
		except ParamsError as ex:
			return self.exception_binding(ex, command_line)

	def _bind(self, scope, command_line:CommandLine, context) -> dict:
		stream = ArgumentStream(command_line.tokens)
		table = parse_declarations(stream, scope, context=context, reserved=self.reserved)
		values = consume_values(stream, table, context=context, echo=self.echo_stream())
		if VERBOSE: print("Params: %d declared, %d bound."%(len(table), len(values)))
		if len(values) < len(table):
			missing = ', '.join(d.name for d in table[len(values):])
			if self.strict: raise MissingArgumentsError(context, None, "values for "+missing)
			warnings.warn("Params: %s: no values were passed for %s."%(context, missing))
		return {d.name: v for d, v in zip(table, values)}

	def exception_binding(self, ex:ParamsError, command_line:CommandLine):
		"""
		Every ParamsError passes through here on the way out.
		Report it however you like. Whatever this returns becomes the result
		of `parse`, but the default behavior is to raise `ex` again.
		"""
		raise ex from None # Hide the catch-and-rethrow from the traceback.


class TypicalBinder(Binder):
	"""
	Reasonable default error reporting: print the complaint on STDERR,
	with a picture of where in the token list it happened, then re-raise.
	"""
	def exception_binding(self, ex:ParamsError, command_line:CommandLine):
		command_line.complain(ex.position, str(ex))
		raise ex from None


def parse(scope, *tokens, context:Optional[str]=None, **options) -> dict:
	""" One-shot convenience: build a TypicalBinder with `options` and use it once. """
	if context is None: context = call_site()
	return TypicalBinder(**options).parse(scope, *tokens, context=context)
