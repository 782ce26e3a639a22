'''
Nested trees of selector scopes, which serialise to stylesheets.

A Stylesheet is the root of a tree. SelectorScopes prefix the selectors of
every rule beneath them, and Rules are the leaves where serialisation ends.

>>> sheet = Stylesheet()
>>> body = SelectorScope('body')
>>> sheet.append(body)
>>> body.append(Rule('form', Declaration('line-height', 1)))
>>> print(sheet)
body form {line-height:1;}
'''

from collections.abc import MutableSequence
from enum import Enum

from . import sequence
from .css import Declaration, Declarations, Selectors


class InvalidNodeError(TypeError):
    pass


class Kind(Enum):
    ROOT = 'root'
    SCOPE = 'scope'
    RULE = 'rule'


class Node(object):
    '''
    Common interface of the objects in a tree. Each node class carries a
    kind, which decides where it may be attached and how it serialises.

    >>> Stylesheet().is_root(), SelectorScope('p').is_root()
    (True, False)
    >>> Rule('p').is_leaf(), SelectorScope('p').is_leaf()
    (True, False)
    '''
    kind = None

    def is_root(self):
        return self.kind is Kind.ROOT

    def is_leaf(self):
        return self.kind is Kind.RULE

    def serialize(self, scope=''):
        raise NotImplementedError

    def __str__(self):
        return self.serialize()


class Leaf(Node):
    kind = Kind.RULE

    def walk(self, filter=None, depth=0):
        filter = filter or (lambda x: True)
        if filter(self):
            yield depth, self


class Rule(Leaf):
    '''
    Pairs selectors with declarations. Single values are accepted for
    either.

    A declaration is a Declaration or a (name, value) tuple.

    >>> print(Rule('p', ('color', 'red')))
    p {color:red;}

    >>> r = Rule('.checked', Declaration('font-weight', 'bold'))
    >>> print(r)
    .checked {font-weight:bold;}
    >>> print(r.serialize('#menu li'))
    #menu li .checked {font-weight:bold;}

    Several selectors are written one after the other, with no separator.

    >>> print(Rule(['.a', '.b'], [('color', 'red')]))
    .a.b {color:red;}
    '''
    template = '%s {%s}'

    def __init__(self, selectors, declarations=()):
        if (isinstance(declarations, tuple) and len(declarations) == 2 and
                isinstance(declarations[0], str)):
            # a lone (name, value) pair
            declarations = [declarations]
        self.selectors = Selectors(sequence(selectors))
        self.declarations = Declarations(sequence(declarations))

    def serialize(self, scope=''):
        prefix = scope + ' ' if scope else ''
        return self.template % (
            ''.join(prefix + str(s) for s in self.selectors),
            ''.join(map(str, self.declarations)),
        )

    def __eq__(self, other):
        return (isinstance(other, Rule) and
                self.selectors == other.selectors and
                self.declarations == other.declarations)

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__,
                               list(self.selectors), list(self.declarations))


class SelectorScope(Node, MutableSequence):
    '''
    One level of selector nesting, holding an ordered list of child nodes.

    >>> nav = SelectorScope('#nav')
    >>> nav.append(Rule('a', [('color', 'white')]))
    >>> nav.append(Rule('li', [('float', 'left')]))
    >>> print(nav)
    #nav a {color:white;}
    #nav li {float:left;}
    >>> print(nav.serialize('body'))
    body #nav a {color:white;}
    body #nav li {float:left;}

    Only nodes can be attached, and never the root of a tree.

    >>> nav.append('a {}')
    Traceback (most recent call last):
     ...
    stylish.tree.InvalidNodeError: 'a {}' is not a node.
    >>> nav[0] = Stylesheet()
    Traceback (most recent call last):
     ...
    stylish.tree.InvalidNodeError: Root nodes cannot be added to trees.

    Out of range children are simply missing.

    >>> print(nav.child_at(5))
    None
    '''
    kind = Kind.SCOPE
    separator = '\n'

    def __init__(self, scope, *nodes):
        self.scope = str(scope)
        self.nodes = []
        self.extend(nodes)

    @staticmethod
    def _check(node):
        if not isinstance(node, Node):
            raise InvalidNodeError('%r is not a node.' % (node,))
        if node.is_root():
            raise InvalidNodeError('Root nodes cannot be added to trees.')
        return node

    def child_at(self, index):
        try:
            return self.nodes[index]
        except IndexError:
            return None

    def replace_child_at(self, index, node):
        self.nodes[index] = self._check(node)

    def __getitem__(self, index):
        return self.nodes[index]

    def __setitem__(self, index, node):
        if isinstance(index, slice):
            self.nodes[index] = [self._check(n) for n in node]
        else:
            self.replace_child_at(index, node)

    def __delitem__(self, index):
        del self.nodes[index]

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def insert(self, index, node):
        self.nodes.insert(index, self._check(node))

    def remove(self, node):
        '''Remove the first child equal to node, if there is one.'''
        if node in self.nodes:
            self.nodes.remove(node)

    def _child_scope(self, scope):
        return self.scope if not scope else scope + ' ' + self.scope

    def serialize(self, scope=''):
        if not self.nodes:
            return ''
        scope = self._child_scope(scope)
        return self.separator.join(
            text for text in (node.serialize(scope) for node in self.nodes)
            if text)

    def walk(self, filter=None, depth=0):
        '''
        Iterate over the entire tree, depth first.

        >>> body = SelectorScope('body', SelectorScope('p', Rule('a')))
        >>> for depth, node in body.walk():
        ...   print(depth, node.kind.value)
        0 scope
        1 scope
        2 rule
        '''
        filter = filter or (lambda x: True)
        if filter(self):
            yield depth, self
        for node in self.nodes:
            for d, sub in node.walk(filter=filter, depth=depth + 1):
                yield d, sub

    def leaves(self, kind=None):
        '''All the leaves beneath this scope, or only those of a given type.'''
        return [node for depth, node in self.walk(
            lambda n: n.is_leaf() and (kind is None or isinstance(n, kind)))]

    def rules(self):
        return self.leaves(Rule)

    def __eq__(self, other):
        return (isinstance(other, SelectorScope) and self.kind is other.kind and
                self.scope == other.scope and self.nodes == other.nodes)

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, ', '.join(
            [repr(self.scope)] + [repr(n) for n in self.nodes]))


class Stylesheet(SelectorScope):
    '''
    The root of a tree. Stylesheets have no selector of their own, so
    their children are never prefixed.

    >>> sheet = Stylesheet(Rule('.checked', [('font-weight', 'bold')]),
    ...                    Rule('.unchecked', [('font-style', 'italic')]))
    >>> print(sheet)
    .checked {font-weight:bold;}
    .unchecked {font-style:italic;}
    >>> print(Stylesheet())
    <BLANKLINE>
    '''
    kind = Kind.ROOT

    def __init__(self, *nodes):
        super(Stylesheet, self).__init__('', *nodes)

    def _child_scope(self, scope):
        return ''

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__,
                           ', '.join(repr(n) for n in self.nodes))


__all__ = ['InvalidNodeError', 'Kind', 'Leaf', 'Node', 'Rule', 'SelectorScope',
           'Stylesheet']
