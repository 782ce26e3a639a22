'''Nested CSS selector trees, built from declarative rule descriptions

>>> print(generate(
...   rule('body',
...     rule('.gilded', rule('.lily', color='gold')),
...     rule('form', line_height=1),
...   ),
... ))
body .gilded .lily {color:gold;}
body form {line-height:1;}
'''

from collections.abc import Mapping

class container(dict):
	'''dict whose items can be retrieved as attributes
	
	>>> c = container(a=1, b=2)
	>>> c.a
	1
	>>> c.b
	2
	>>> c.a = 3
	>>> c['a']
	3
	
	If a key isn't found, None is returned...
	
	>>> print(c.c)
	None
	
	but item access raises an exception
	>>> c['c']
	Traceback (most recent call last):
	  ...
	KeyError: 'c'
	'''
	__getattr__ = dict.get
	__setattr__ = dict.__setitem__
	__delattr__ = dict.__delitem__

def sequence(x):
	'''Converts its argument into a list, but is sensitive to arguments that are
	iterable but not collections of values (i.e. strings and mappings)
	
	>>> sequence(0)
	[0]
	>>> sequence('0')
	['0']
	>>> sequence((1,2,3))
	[1, 2, 3]
	>>> sequence(a*2+1 for a in range(5))
	[1, 3, 5, 7, 9]
	>>> sequence([])
	[]
	'''
	return list(x) if is_sequence(x) else [x]

def is_sequence(x):
	'''Determines whether its argument is a proper sequence (i.e. list, tuple,
	but not string or dict)
	
	>>> is_sequence(None)
	False
	>>> is_sequence('None')
	False
	>>> is_sequence(['None'])
	True
	>>> is_sequence({'a':'b'})
	False
	>>> is_sequence((None,))
	True
	
	Setting the class attribute __sequence__ to a false value can override any
	other criteria
	
	>>> class A(list):
	...   pass
	>>> class B(list):
	...   __sequence__ = False
	>>> is_sequence(A())
	True
	>>> is_sequence(B())
	False
	'''
	if isinstance(x, (str, bytes, Mapping)):
		return False
	return hasattr(x,'__iter__') and getattr(x,'__sequence__',True)

def flatten(x):
	'''Converts nested iterators into a single list. As with sequence(x), strings
	are not considered to be iterators.
	
	>>> flatten(1)
	[1]
	>>> flatten('123')
	['123']
	>>> flatten([1, [2], [[3]]])
	[1, 2, 3]
	>>> flatten([1, [2, [3, [[4]]]]])
	[1, 2, 3, 4]
	'''
	return [a for i in x for a in flatten(i)] if is_sequence(x) else [x]

__all__ = ['container', 'sequence', 'is_sequence', 'flatten']

from .css import Declaration, Declarations, Selector, Selectors, Units, url
from .tree import InvalidNodeError, Kind, Leaf, Node, Rule, SelectorScope, Stylesheet
from .description import Description, RuleSpec, describe, generate, rule

__all__ += [
	'Declaration', 'Declarations', 'Selector', 'Selectors', 'Units', 'url',
	'InvalidNodeError', 'Kind', 'Leaf', 'Node', 'Rule', 'SelectorScope',
	'Stylesheet', 'Description', 'RuleSpec', 'describe', 'generate', 'rule',
]
