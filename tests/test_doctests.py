#!/usr/bin/env python

import doctest
import unittest

import stylish
import stylish.css
import stylish.tree
import stylish.description

class DocTest(unittest.TestCase):
	def test_modules(self):
		for module in (stylish, stylish.css, stylish.tree, stylish.description):
			failed, attempted = doctest.testmod(module)
			self.assertEqual(failed, 0, module.__name__)
			self.assertTrue(attempted, module.__name__)

if __name__ == '__main__':
	unittest.main()
