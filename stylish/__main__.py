'''Print the stylesheet described by JSON rule specs

Each file holds a list of rules, written as objects with "selectors",
"declarations" and "nested" keys, or as [selectors, declarations, nested]
arrays. All files add to the same stylesheet.
'''

import argparse
import json
import logging
import sys

from .description import describe
from .tree import Stylesheet

def load(parser, f):
	name = getattr(f, 'name', '<stdin>')
	try:
		specs = json.load(f)
	except ValueError as e:
		parser.error('%s: %s' % (name, e))
	finally:
		if f is not sys.stdin:
			f.close()
	if not isinstance(specs, list):
		parser.error('%s: expected a list of rules' % name)
	return specs

def main(argv=None, out=None):
	parser = argparse.ArgumentParser(prog='stylish', description=__doc__.splitlines()[0])
	parser.add_argument('files', nargs='*', type=argparse.FileType('r'),
		metavar='FILE', help='JSON rule specs (default: standard input)')
	parser.add_argument('-v', dest='verbosity', action='count', default=0,
		help='log more detail, may be repeated')
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.WARNING - 10 * min(args.verbosity, 2))

	sheet = Stylesheet()
	for f in args.files or [sys.stdin]:
		specs = load(parser, f)
		try:
			describe(sheet, specs)
		except TypeError as e:
			parser.error('%s: %s' % (getattr(f, 'name', '<stdin>'), e))

	text = sheet.serialize()
	if text:
		print(text, file=out or sys.stdout)
	return 0

if __name__ == '__main__':
	sys.exit(main())
