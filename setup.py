#!/usr/bin/env python

from os import path

from setuptools import setup


packages = [
    'cojar',
]

requires = [
    'pyyaml',
    'tldextract>=3',
]

test_requirements = [
    'pytest>=3.0.0',
    'pytest-cov',
]

extras_require = {
    'test': test_requirements,  # setup no longer tests, so make them an extra
}

scripts = [
    'scripts/cojar-convert.py',
]

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    description = f.read()

setup(
    name='cojar',
    version='0.1.0',
    description='A persistent HTTP cookie jar for Python',
    long_description=description,
    long_description_content_type='text/markdown',
    author='cojar contributors',
    packages=packages,
    python_requires=">=3.6.3",
    extras_require=extras_require,
    install_requires=requires,
    scripts=scripts,
    license='Apache 2.0',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Internet :: WWW/HTTP',
    ],
)
