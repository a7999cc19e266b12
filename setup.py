# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    PyPi Setup Tool
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

from setuptools import setup
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
version = open(os.path.join(here, 'scriptlib', 'config', 'VERSION'), encoding='utf-8').read().strip()

# Get the long description from the relevant file
readmetxt = ''
try:
      with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
          readmetxt = f.read()
except IOError:
      pass

kwargs = {}


install_requires = [
      'ecdsa>=0.17',
      'pycryptodome>=3.14.1',
]

kwargs['install_requires'] = install_requires
kwargs['extras_require'] = {
      'test': ['pytest'],
}

setup(
      name='scriptlib',
      version=version,
      description='Bitcoin Script interpreter for text scripts with pluggable hash and signature verification',
      long_description=readmetxt,
      classifiers=[
            'Development Status :: 3 - Alpha',
            'Intended Audience :: Developers',
            'Intended Audience :: Science/Research',
            'Intended Audience :: Information Technology',
            'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',
            'Natural Language :: English',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: Security :: Cryptography',
      ],
      url='http://github.com/1200wd/scriptlib',
      author='1200wd',
      author_email='info@1200wd.com',
      license='GNU3',
      packages=['scriptlib', 'scriptlib.config'],
      package_data={'scriptlib': ['config/VERSION', 'config/config.ini']},
      test_suite='tests',
      include_package_data=True,
      keywords='bitcoin script interpreter stack opcodes p2pkh validation',
      zip_safe=False,
      **kwargs
)
