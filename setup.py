#!/usr/bin/env python

from setuptools import setup

setup(
	name='stylish',
	version='0.0.1',
	author='Ryan Marquardt',
	author_email='ryan@integralws.com',
	description='Nested CSS selector trees, serialised to stylesheets',
	packages=[
		'stylish',
	],
	python_requires='>=3.6',
	license='Simplified BSD License',
)
