"""
Shell scripts bind outputs by name in their caller's scope. In Python we ask the caller
to hand over the scope explicitly instead. A scope is either:

* a mutable mapping, in which a name is "defined" if it is already a key, or
* any other object, in which a name is "defined" if it is already an instance attribute
  (one the caller set, not a method or anything inherited from the class).

Either way, if the thing currently stored under that name is itself an OutputBinding
(a Slot, for instance) then the binder writes through that handle and leaves the
scope itself alone. That lets one dictionary of slots serve as a ready-made scope.

The key question is what happens when a name is not defined. For now, `resolve`
raises NoSuchVariable, and the declaration parser turns that into a proper diagnostic.
"""

from collections.abc import MutableMapping

from .interface import OutputBinding

class NoSuchVariable(KeyError):
	pass

class Slot(OutputBinding):
	""" A pre-allocated cell. Looks empty (None) until something is bound into it. """
	def __init__(self, value=None):
		self.value = value
	def assign(self, value):
		self.value = value
	def __repr__(self):
		return "Slot(%r)"%(self.value,)

class KeyBinding(OutputBinding):
	def __init__(self, mapping:MutableMapping, key):
		self.mapping, self.key = mapping, key
	def assign(self, value):
		self.mapping[self.key] = value

class AttributeBinding(OutputBinding):
	def __init__(self, host:object, name:str):
		self.host, self.name = host, name
	def assign(self, value):
		setattr(self.host, self.name, value)

def slots(*names) -> dict[str, Slot]:
	""" Make a scope of fresh slots, one per name. """
	return {name: Slot() for name in names}

def _own_attribute(scope, name:str):
	""" Only attributes the caller put on the object count; inherited methods and dunders do not. """
	try: own = vars(scope)
	except TypeError: own = None
	if own is not None:
		if name not in own: raise NoSuchVariable(name)
		return own[name]
	if name.startswith('_'): raise NoSuchVariable(name)
	try: current = getattr(scope, name)
	except AttributeError: raise NoSuchVariable(name) from None
	if callable(current) and not isinstance(current, OutputBinding): raise NoSuchVariable(name)
	return current

def resolve(scope, name:str) -> OutputBinding:
	""" Find the output binding for a name, or raise NoSuchVariable. """
	if isinstance(scope, MutableMapping):
		if name not in scope: raise NoSuchVariable(name)
		current = scope[name]
		return current if isinstance(current, OutputBinding) else KeyBinding(scope, name)
	current = _own_attribute(scope, name)
	return current if isinstance(current, OutputBinding) else AttributeBinding(scope, name)
