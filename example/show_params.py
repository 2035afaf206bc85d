"""========================================================================================================
A sample of the intended use: a function which accepts a self-describing argument list
and lets paramparse sort out which token goes where.

The caller passes an array and a dictionary, each tagged with its type. The function
declares, in order, what it expects and where to put it, then reads its own variables.

Run this file to see it go. The array also gets echoed as it is decoded; that's normal.
"""
import paramparse

def describe_array_and_dictionary(*args):
	scope = {'array': [], 'dictionary': {}}
	paramparse.parse(scope, '--array', 'array', '--dictionary', 'dictionary', '--', *args)
	return [
		"Array values: " + ' '.join(scope['array']),
		"Dictionary keys: " + ' '.join(scope['dictionary']),
		"Dictionary values: " + ' '.join(scope['dictionary'].values()),
	]

def tagged(array, dictionary):
	""" Build the value half of a command line from plain Python data, escaping where needed. """
	def escape(token): return '\\'+token if token.startswith('-') else token
	return [
		'--array', *map(escape, array),
		'--dictionary', '--keys', *map(escape, dictionary.keys()), '--values', *map(escape, dictionary.values()),
	]

if __name__ == '__main__':
	for line in describe_array_and_dictionary(*tagged(['item1', 'item2', '-item3'], {'key1': 'item1', 'key2': 'item2'})):
		print(line)
