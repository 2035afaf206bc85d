"""
Bind a command line of declarations and values, then show what got bound, in JSON format.

The command line goes in as a single shell-quoted string, for example:

  py -m paramparse -D names,greeting "-a names -s greeting -- -a Alice Bob -s Hello"

Every name mentioned in a declaration must first be defined with -D.
"""

import sys, argparse, json, shlex

from paramparse import binder
from paramparse.interface import ParamsError

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m paramparse', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('command_line', help='declarations, "--", and values, as one shell-quoted string')
	parser.add_argument('-D', '--define', action='append', default=[], metavar='NAMES', help='define output variables (comma-separated; may be repeated)')
	parser.add_argument('-i', '--indent', help='indent the JSON output for easier reading.', action='store_const', dest='indent', const=2, default=None)
	parser.add_argument('-q', '--quiet', action='store_true', help='do not echo decoded arrays.')
	parser.add_argument('--strict', action='store_true', help='treat declarations left without values as an error.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about how many values got bound.")
	return parser.parse_args(argv)

def main(args):
	if args.verbose: binder.VERBOSE = True
	scope = {name: None for group in args.define for name in group.split(',') if name}
	try: tokens = shlex.split(args.command_line)
	except ValueError as e:
		print(e.args[0], file=sys.stderr)
		sys.exit(1)
	typical = binder.TypicalBinder(echo=None if args.quiet else True, strict=args.strict)
	try: typical.parse(scope, *tokens, context='py -m paramparse')
	except ParamsError:
		sys.exit(1)
	json.dump(scope, sys.stdout, indent=args.indent)
	print()

if __name__ == '__main__': main(parse_arguments())
