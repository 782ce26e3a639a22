#!/usr/bin/env python

import unittest

from stylish.css import *

class SelectorTest(unittest.TestCase):
	def test_plain(self):
		self.assertEqual(str(Selector('.gilded')), '.gilded')

	def test_parts(self):
		s = Selector('a', _class='nav', _id='home', _state='hover')
		self.assertEqual(str(s), 'a.nav#home:hover')

	def test_child(self):
		self.assertEqual(str(Selector('ul', _child='li')), 'ul>li')

	def test_equality(self):
		self.assertEqual(Selector('p'), Selector('p'))
		self.assertNotEqual(Selector('p'), Selector('a'))
		self.assertEqual(Selector('div', _id='x'), Selector('div#x'))

class DeclarationTest(unittest.TestCase):
	def test_render(self):
		self.assertEqual(str(Declaration('font-weight', 'bold')), 'font-weight:bold;')

	def test_numbers(self):
		self.assertEqual(str(Declaration('line-height', 1)), 'line-height:1;')

	def test_several_values(self):
		d = Declaration('margin', 0, 'auto')
		self.assertEqual(d.value, '0 auto')
		self.assertEqual(str(d), 'margin:0 auto;')

	def test_none(self):
		self.assertEqual(str(Declaration('float', None)), 'float:none;')

	def test_important(self):
		d = Declaration('color', 'red', important=True)
		self.assertEqual(str(d), 'color:red !important;')

class CollectionTest(unittest.TestCase):
	def test_selectors_wrap_strings(self):
		s = Selectors(['.a', Selector('.b')])
		self.assertTrue(all(isinstance(x, Selector) for x in s))
		self.assertEqual(str(s), '.a, .b')

	def test_duplicates_and_order(self):
		s = Selectors(['.b', '.a', '.b'])
		self.assertEqual([str(x) for x in s], ['.b', '.a', '.b'])
		d = Declarations([('color', 'red'), ('color', 'red')])
		self.assertEqual(len(d), 2)

	def test_declarations_concatenate(self):
		d = Declarations([Declaration('color', 'gold'), ('text-indent', Units.Em(1))])
		self.assertEqual(str(d), 'color:gold;text-indent:1em;')

	def test_declarations_reject(self):
		with self.assertRaises(TypeError):
			Declarations(['color'])

	def test_mutation(self):
		s = Selectors(['h1', 'h2'])
		s[1] = 'h3'
		s.insert(0, 'h0')
		del s[1]
		self.assertEqual(s, Selectors(['h0', 'h3']))

class UnitTest(unittest.TestCase):
	def test_units(self):
		self.assertEqual(Units.Px(20), '20px')
		self.assertEqual(Units.Em(1.5), '1.5em')
		self.assertEqual(Units.Pct(50), '50%')

	def test_zero(self):
		self.assertEqual(Units.Px(0), '0')
		self.assertEqual(Units.S(0), '0s')

	def test_not_a_number(self):
		self.assertEqual(Units.Px('auto'), 'auto')

	def test_url(self):
		self.assertEqual(url('a.png'), "url('a.png')")

if __name__ == '__main__':
	unittest.main()
