#!/usr/bin/python3
# Copyright 2013 craigslist
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

'''anybase package setuptools script.'''

import setuptools

import anybase

setuptools.setup(
    name='anybase',
    version=anybase.__version__,
    description='Numeral and binary encoding with any alphabet',
    long_description=open('README.rst').read(),
    author='craigslist',
    author_email='opensource@craigslist.org',
    url='http://craigslist.org/about/opensource',
    packages=setuptools.find_packages(exclude=['test*']),
    scripts=['bin/anybase'],
    install_requires=[],
    extras_require={'test': ['pytest']},
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules'])
