"""
The argument stream is to the binder what the scanner is to a parser:
a cursor over the input which only ever moves to the right.

The cursor remembers where the most recently consumed token sat in the original
list (`left`) and where the next one sits (`right`). Lookahead is exactly one token.
"""

from typing import Optional, Sequence

def is_flag_like(token:str) -> bool:
	""" Anything beginning with a dash ends a run of literals. An escaped dash does not. """
	return token.startswith('-')

def unescape(token:str) -> str:
	""" A literal that must start with a dash is written with one backslash in front: \\-x means -x. """
	return token[1:] if token.startswith('\\-') else token

class ArgumentStream:

	def __init__(self, tokens:Sequence[str]):
		self.__tokens = tuple(tokens)
		self.__size = len(self.__tokens)
		self.left = self.right = 0

	def has_more(self) -> bool:
		return self.right < self.__size

	def peek(self) -> Optional[str]:
		""" The next token, or None at end of stream. Consumes nothing. """
		return self.__tokens[self.right] if self.has_more() else None

	def next(self) -> str:
		""" Consume one token and return it. Raises IndexError at end of stream. """
		if not self.has_more(): raise IndexError(self.right)
		self.left = self.right
		self.right += 1
		return self.__tokens[self.left]

	def position(self) -> Optional[int]:
		""" Where the next token would be, or None if there is none. Used in error reports. """
		return self.right if self.has_more() else None

	def take_literals(self) -> list[str]:
		"""
		Consume tokens up to (not including) the next flag-like token or end of stream,
		unescaping each one as it goes.
		"""
		literals = []
		while self.has_more() and not is_flag_like(self.peek()):
			literals.append(unescape(self.next()))
		return literals
