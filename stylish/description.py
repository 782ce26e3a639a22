'''Build selector trees from nested rule descriptions

A description is a list of rule specs. Each names one or more selectors,
some declarations, and optionally a nested block of further specs which
are scoped beneath each of its selectors.

>>> sheet = generate(
...   rule(['.a', '.b'], {'color': 'red'},
...     rule('.c', x=1),
...   ),
... )
>>> print(sheet)
.a {color:red;}
.a .c {x:1;}
.b {color:red;}
.b .c {x:1;}

Property names are written with underscores in place of hyphens, so that
they can be given as keyword arguments.

>>> print(generate(rule('.checked', font_weight='bold')))
.checked {font-weight:bold;}

Plain data works too, such as decoded JSON.

>>> data = [['body', None, [['p', {'margin': [0, 'auto']}]]]]
>>> print(describe(Stylesheet(), data))
body p {margin:0 auto;}
'''

import logging
from collections.abc import Mapping

from . import is_sequence, sequence
from .css import Declaration, Selector
from .tree import Rule, SelectorScope, Stylesheet

logger = logging.getLogger(__name__)


class RuleSpec(object):
	'''A single rule of a description.
	
	nested is None when the rule has no block of its own. An empty list is
	an empty block.
	'''
	fields = {'selectors', 'declarations', 'nested'}

	def __init__(self, selectors, declarations=None, nested=None):
		self.selectors = selectors
		self.declarations = declarations
		self.nested = nested

	@classmethod
	def coerce(cls, value):
		'''
		>>> RuleSpec.coerce({'selectors': 'p', 'declarations': {'color': 'red'}})
		RuleSpec('p', {'color': 'red'}, None)
		>>> RuleSpec.coerce(('h1', {'margin': 0}))
		RuleSpec('h1', {'margin': 0}, None)
		>>> RuleSpec.coerce(42)
		Traceback (most recent call last):
		 ...
		TypeError: Can't make a rule out of 42
		'''
		if isinstance(value, RuleSpec):
			return value
		if isinstance(value, Mapping):
			if not set(value) <= cls.fields or 'selectors' not in value:
				raise TypeError("Can't make a rule out of %r" % (value,))
			return cls(**value)
		if is_sequence(value) and 0 < len(value) <= 3:
			return cls(*value)
		raise TypeError("Can't make a rule out of %r" % (value,))

	def __eq__(self, other):
		return isinstance(other, RuleSpec) and (
			(self.selectors, self.declarations, self.nested) ==
			(other.selectors, other.declarations, other.nested))

	def __repr__(self):
		return '%s(%r, %r, %r)' % (self.__class__.__name__,
			self.selectors, self.declarations, self.nested)


def rule(selectors, *children, **declarations):
	'''Describe a rule.
	
	Mappings among the children are declarations, as are keyword arguments.
	Lists among the children are blocks of nested rules, and any other child
	is a single nested rule. None children are ignored.
	
	>>> rule('body', {'margin': 0}, rule('p', color='black'), padding=0)
	RuleSpec('body', {'margin': 0, 'padding': 0}, [RuleSpec('p', {'color': 'black'}, None)])
	'''
	props = {}
	nested = None
	for child in children:
		if child is None:
			continue
		if isinstance(child, Mapping):
			props.update(child)
			continue
		if nested is None:
			nested = []
		if isinstance(child, list):
			nested.extend(RuleSpec.coerce(c) for c in child)
		else:
			nested.append(RuleSpec.coerce(child))
	props.update(declarations)
	return RuleSpec(selectors, props, nested)


def _declaration(item):
	if isinstance(item, Declaration):
		return item
	name, value = item
	return Declaration(str(name).replace('_', '-'), *sequence(value))


def _declarations(declarations):
	if isinstance(declarations, Mapping):
		declarations = declarations.items()
	return [_declaration(item) for item in declarations or ()]


def describe(scope, specs):
	'''Evaluate specs, attaching what they describe to scope.'''
	for spec in specs:
		spec = RuleSpec.coerce(spec)
		attach(scope, spec.selectors, spec.declarations, spec.nested)
	return scope


def attach(scope, selectors, declarations=None, nested=None):
	'''Attach a single rule, and any rules nested within it, to scope.'''
	if not declarations and nested is None:
		logger.debug('Skipping empty rule %r', selectors)
		return
	selectors = [s if isinstance(s, Selector) else Selector(s)
	             for s in sequence(selectors)]
	if not selectors:
		logger.debug('Skipping rule without selectors')
		return
	declarations = _declarations(declarations)

	if nested is None:
		node = Rule(selectors, declarations)
		logger.debug('Adding rule %r to %r', node, scope.scope)
		scope.append(node)
		return

	for selector in selectors:
		if declarations:
			logger.debug('Adding rule %s to %r', selector, scope.scope)
			scope.append(Rule(selector, declarations))
		child = SelectorScope(str(selector))
		logger.debug('Opening scope %r in %r', child.scope, scope.scope)
		scope.append(child)
		describe(child, nested)


class Description(object):
	'''A scope to which rules are added one call at a time.
	
	>>> d = Description()
	>>> d.rule('.checked', {'font_weight': 'bold'})
	>>> d.rule('.empty')
	>>> d.rule('ul', nested=[rule('li', list_style='none')])
	>>> print(d.node)
	.checked {font-weight:bold;}
	ul li {list-style:none;}
	'''
	def __init__(self, node=None):
		self.node = Stylesheet() if node is None else node

	def rule(self, selectors, declarations=None, nested=None):
		attach(self.node, selectors, declarations, nested)


def generate(*specs):
	'''Evaluate specs, one rule per argument, against a new Stylesheet.'''
	return describe(Stylesheet(), specs)


__all__ = ['Description', 'RuleSpec', 'attach', 'describe', 'generate', 'rule']
