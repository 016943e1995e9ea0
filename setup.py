#!/usr/bin/env python
# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------

import os
from setuptools import setup, find_packages

# Define version information
VERSION = '0.1.0'
write_version = True

if write_version:
    txt = "# " + ("-" * 77) + "\n"
    txt += "# " + "Copyright 2014 Nervana Systems Inc. All rights reserved.\n"
    txt += "# " + ("-" * 77) + "\n"
    txt += "\"\"\"\n%s\n\"\"\"\nVERSION = '%s'\nSHORT_VERSION = '%s'\n"
    fname = os.path.join(os.path.dirname(__file__), 'axon', 'version.py')
    with open(fname, 'w') as f:
        f.write(txt % ("Project version information.", VERSION, VERSION))

# Define dependencies
required_packages = ['numpy>=1.8.1', 'PyYAML>=3.11']
extras = {'test': ['pytest>=6.0'],
          'dev': ['pytest>=6.0', 'flake8>=2.2.2', 'pep8-naming>=0.2.2']}

with open(os.path.join(os.path.dirname(__file__), 'README.md')) as f:
    long_description = f.read()

setup(name='axon',
      version=VERSION,
      description='Activation functions with batched forward and backward '
                  'evaluation',
      long_description=long_description,
      long_description_content_type='text/markdown',
      license='License :: Other/Proprietary License',
      packages=find_packages(),
      package_data={'axon.experiments.tests': ['*.yaml']},
      install_requires=required_packages,
      extras_require=extras,
      python_requires='>=3.7',
      classifiers=['Development Status :: 2 - Pre-Alpha',
                   'Intended Audience :: Developers',
                   'Intended Audience :: Science/Research',
                   'License :: Other/Proprietary License',
                   'Operating System :: POSIX',
                   'Operating System :: MacOS :: MacOS X',
                   'Programming Language :: Python :: 3',
                   'Topic :: Scientific/Engineering :: ' +
                   'Artificial Intelligence'])
