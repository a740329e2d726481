# setup.py - Setup Configuration
# ============================================================================
"""
Setup configuration for fastseries
"""

from setuptools import setup, find_packages
import os
import codecs

HERE = os.path.abspath(os.path.dirname(__file__))


def read_file(filename):
    """Read file content"""
    with codecs.open(os.path.join(HERE, filename), encoding='utf-8') as f:
        return f.read()


def get_version():
    """Get version from __init__.py"""
    with open(os.path.join(HERE, 'fastseries', '__init__.py')) as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip('"').strip("'")
    return '1.0.0'


# Read requirements
def get_requirements(filename='requirements.txt'):
    """Parse requirements file"""
    with open(os.path.join(HERE, filename)) as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]


# Long description from README
long_description = read_file('README.md') if os.path.exists(os.path.join(HERE, 'README.md')) else ''

setup(
    name='fastseries',
    version=get_version(),
    description='Fast exact-rational truncated power series for SymPy expressions',
    long_description=long_description,
    long_description_content_type='text/markdown',

    packages=find_packages(exclude=['tests*', 'docs*', 'scripts*']),

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],

    python_requires='>=3.8',

    install_requires=get_requirements(),

    extras_require={
        'test': get_requirements('requirements-dev.txt'),
    },

    entry_points={
        'console_scripts': [
            'fastseries=fastseries.cli:main',
        ],
    },

    zip_safe=False,

    keywords=[
        'power series', 'taylor series', 'symbolic computation', 'sympy',
        'rational arithmetic', 'mathematics'
    ],
)
