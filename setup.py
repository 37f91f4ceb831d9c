#! /usr/bin/env python
# -*- coding: utf-8 -*-
"""
mseedfast - fast MiniSEED decoding with numpy.

mseedfast reads MiniSEED archives into continuous sample traces with absolute
per-sample timing. All record headers of an archive are parsed in one pass
and the STEIM1/STEIM2 decompression is vectorised with numpy, so no compiled
extension is needed. A reader for SAC pole/zero response files is included.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""

import inspect
import os
import re
import sys

from setuptools import find_packages, setup


# The minimum python version which can be used to run mseedfast
MIN_PYTHON_VERSION = (3, 8)

# Fail fast if the user is on an unsupported version of python.
if sys.version_info < MIN_PYTHON_VERSION:
    msg = ("mseedfast requires python version >= {}".format(
           MIN_PYTHON_VERSION) +
           " you are using python version {}".format(sys.version_info))
    print(msg, file=sys.stderr)
    sys.exit(1)

# Directory of the current file in the (hopefully) most reliable way
# possible
SETUP_DIRECTORY = os.path.dirname(os.path.abspath(inspect.getfile(
    inspect.currentframe())))

DOCSTRING = __doc__.split("\n")

# Hard dependencies needed to install/run mseedfast.
INSTALL_REQUIRES = [
    'numpy>=1.20',
    'decorator',
]
# Extra dependencies
EXTRAS_REQUIRES = {
    'tests': [
        'pytest',
    ],
}
EXTRAS_REQUIRES['all'] = [dep for depl in EXTRAS_REQUIRES.values()
                          for dep in depl]

# package specific settings
KEYWORDS = [
    'MiniSEED', 'MSEED', 'SEED', 'Steim', 'STEIM1', 'STEIM2', 'SAC',
    'poles and zeros', 'seismology', 'seismogram', 'waveform']

ENTRY_POINTS = {
    'console_scripts': [
        'mseedfast-print = mseedfast.scripts.print:main',
        'mseedfast-recordanalyzer = '
        'mseedfast.io.mseed.scripts.recordanalyzer:main',
    ],
}


def get_version():
    """
    Read the version string from mseedfast/__init__.py without importing
    the package.
    """
    filename = os.path.join(SETUP_DIRECTORY, "mseedfast", "__init__.py")
    with open(filename, "r") as fh:
        match = re.search(r'^__version__ = [\'"]([^\'"]+)[\'"]', fh.read(),
                          re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find version string in %s" % filename)
    return match.group(1)


def setupPackage():
    # setup package
    setup(
        name='mseedfast',
        version=get_version(),
        description=DOCSTRING[1],
        long_description="\n".join(DOCSTRING[3:]),
        author='The mseedfast Development Team',
        license='GNU Lesser General Public License, Version 3 (LGPLv3)',
        platforms='OS Independent',
        classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Science/Research',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: '
                'GNU Lesser General Public License v3 (LGPLv3)',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering',
            'Topic :: Scientific/Engineering :: Physics'],
        keywords=KEYWORDS,
        packages=find_packages(include=['mseedfast', 'mseedfast.*']),
        include_package_data=True,
        zip_safe=False,
        python_requires=f'>={MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]}',
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRES,
        entry_points=ENTRY_POINTS,
    )


if __name__ == '__main__':
    setupPackage()
