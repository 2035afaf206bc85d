"""
This module is all about easing over the process to display where things go wrong.

The binder knows positions only as token indexes. A person reading a complaint
would rather see the command line laid out as they might have typed it, with the
offending token underlined. The CommandLine class does the bookkeeping to make
that picture: it quotes each token the way a POSIX shell would accept it, joins
them with single spaces, and remembers where each token landed.

A position of None means "the tokens ran out", so the picture points just past
the end of the line.
"""

import shlex, sys
from typing import Optional, Sequence

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class CommandLine:
	""" Wrapper for a token list: participates in half-respectable error-display with context. """
	def __init__(self, tokens:Sequence[str]):
		self.tokens = tuple(tokens)
		self.__bounds = None
		self.__text = None

	def __make_bounds(self):
		""" Lazily quote the tokens only if it turns out a picture is needed. """
		if self.__bounds is None:
			quoted = [shlex.quote(str(token)) for token in self.tokens]
			self.__bounds, cursor = [], 0
			for q in quoted:
				self.__bounds.append((cursor, cursor+len(q)))
				cursor += len(q) + 1
			self.__text = ' '.join(quoted)

	@property
	def text(self) -> str:
		self.__make_bounds()
		return self.__text

	def span(self, position:Optional[int]) -> tuple[int, int]:
		""" Character offsets (start, stop) of the token at `position` within self.text. """
		self.__make_bounds()
		if position is None or position >= len(self.__bounds):
			end = len(self.text) + (1 if self.text else 0)
			return end, end+1
		return self.__bounds[position]

	def complaint(self, position:Optional[int], message:str) -> str:
		left, right = self.span(position)
		caption = "here" if position is not None else "tokens ran out here"
		illustrated = illustration(self.text+' ', left, right - left, prefix=' >>> ', caption=caption)
		return "%s\n%s"%(message, illustrated)

	def complain(self, position:Optional[int], message:str):
		print(self.complaint(position, message), file=sys.stderr)
