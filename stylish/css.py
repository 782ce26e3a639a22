'''Selectors and declarations, the primitives of a style rule

>>> print(Declaration('padding', 0, Units.Px(20), Units.Px(15)))
padding:0 20px 15px;
>>> print(Selector('a', _state='hover'))
a:hover

Both have ordered collections, which keep duplicates and insertion order.

>>> print(Selectors(['.a', '.b', '.a']))
.a, .b, .a
>>> print(Declarations([Declaration('color', 'red'), ('margin', [0, 'auto'])]))
color:red;margin:0 auto;
'''

from collections.abc import MutableSequence
from functools import partial

from . import container, sequence, is_sequence

def _css(value):
	return 'none' if value is None else str(value)

class Selector(object):
	'''Class for specifying a css element selector
	
	Match elements by type
	
	>>> print(Selector('input'))
	input
	
	Match elements by class
	
	>>> print(Selector(_class='important'))
	.important
	
	Match elements by id
	
	>>> print(Selector('div', _id='content'))
	div#content
	
	Match a direct child
	>>> print(Selector('div', _child=Selector('p')))
	div>p
	'''
	def __init__(self, text='', _class=None, _id=None, _state=None, _child=None):
		self.text = str(text)
		self._class = _class
		self._id = _id
		self._state = _state
		self._child = _child

	def __str__(self):
		result = self.text
		if self._class: result += '.'+self._class
		if self._id: result += '#'+self._id
		if self._state: result += ':'+self._state
		if self._child: result += '>'+str(self._child)
		return result

	def __repr__(self):
		return '%s(%r)' % (self.__class__.__name__, str(self))

	def __eq__(self, other):
		return isinstance(other, Selector) and str(self) == str(other)

	def __hash__(self):
		return hash(str(self))

class Declaration(object):
	'''A single css property and its value
	
	>>> print(Declaration('background', 'transparent'))
	background:transparent;
	
	Several values are separated by spaces, and None is written as 'none'
	
	>>> print(Declaration('border', Units.Px(1), 'solid', '#000'))
	border:1px solid #000;
	>>> print(Declaration('display', None))
	display:none;
	
	The keyword 'important' appends '!important' to the value
	>>> print(Declaration('position', 'absolute', important=True))
	position:absolute !important;
	'''
	template = '%s:%s;'

	def __init__(self, name, *values, important=False):
		self.name = str(name)
		self.values = list(values)
		self.important = important

	@property
	def value(self):
		values = list(map(_css, self.values))
		if self.important:
			values.append('!important')
		return ' '.join(values)

	def __str__(self):
		return self.template % (self.name, self.value)

	def __repr__(self):
		return '%s(%r, %r)' % (self.__class__.__name__, self.name, self.value)

	def __eq__(self, other):
		return isinstance(other, Declaration) and str(self) == str(other)

	def __hash__(self):
		return hash(str(self))

class _Values(MutableSequence):
	separator = ''

	def __init__(self, values=()):
		self.values = []
		for value in values:
			self.append(value)

	def coerce(self, value):
		return value

	def __getitem__(self, index):
		return self.values[index]

	def __setitem__(self, index, value):
		if isinstance(index, slice):
			self.values[index] = [self.coerce(v) for v in value]
		else:
			self.values[index] = self.coerce(value)

	def __delitem__(self, index):
		del self.values[index]

	def __len__(self):
		return len(self.values)

	def insert(self, index, value):
		self.values.insert(index, self.coerce(value))

	def __eq__(self, other):
		return isinstance(other, self.__class__) and self.values == other.values

	def __str__(self):
		return self.separator.join(map(str, self.values))

	def __repr__(self):
		return '%s(%r)' % (self.__class__.__name__, self.values)

class Selectors(_Values):
	'''Ordered selectors of a rule. Strings are wrapped in Selector.
	
	>>> s = Selectors(['h1'])
	>>> s.append('h2')
	>>> s
	Selectors([Selector('h1'), Selector('h2')])
	'''
	separator = ', '

	def coerce(self, value):
		return value if isinstance(value, Selector) else Selector(value)

class Declarations(_Values):
	'''Ordered declarations of a rule, given as Declaration objects or
	(name, value) pairs.
	
	>>> d = Declarations()
	>>> d.append(('font-weight', 'bold'))
	>>> d.append(('font-weight', 'bold'))
	>>> print(d)
	font-weight:bold;font-weight:bold;
	'''
	def coerce(self, value):
		if isinstance(value, Declaration):
			return value
		if is_sequence(value) and len(value) == 2:
			name, value = value
			return Declaration(name, *sequence(value))
		raise TypeError('%r is not a declaration' % (value,))

def unit(fmt, i, force=False):
	try:
		i = float(i)
	except (TypeError, ValueError):
		return i
	else:
		return fmt%i if i or force else '0'

Units = container(
	Px = partial(unit, '%gpx'),
	In = partial(unit, '%gin'),
	Cm = partial(unit, '%gcm'),
	Mm = partial(unit, '%gmm'),
	Em = partial(unit, '%gem'),
	Rem = partial(unit, '%grem'),
	Ex = partial(unit, '%gex'),
	Pt = partial(unit, '%gpt'),
	Pc = partial(unit, '%gpc'),
	Pct = partial(unit, '%g%%'),
	S = partial(unit, '%gs', force=True),
)

def url(path):
	'''
	>>> url('/static/logo.png')
	"url('/static/logo.png')"
	'''
	return 'url(%r)'%path

__all__ = ['Declaration', 'Declarations', 'Selector', 'Selectors', 'Units',
'unit', 'url']
