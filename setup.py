#!/usr/bin/env python3
"""
Setup script for StyleStats.

Installs the stylestats package with all dependencies.
"""

from setuptools import setup, find_packages
import os

# Read the README for long description
here = os.path.abspath(os.path.dirname(__file__))
readme_path = os.path.join(here, 'README.md')

if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = 'Stylesheet statistics: selectors, colors, fonts and declaration anti-patterns.'

# Read requirements
requirements_path = os.path.join(here, 'requirements.txt')
install_requires = []
if os.path.exists(requirements_path):
    with open(requirements_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                install_requires.append(line)

setup(
    name='stylestats',
    version='1.0.0',
    author='StyleStats Team',
    author_email='',
    description='Stylesheet statistics: selectors, colors, fonts and declaration anti-patterns',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'stylestats.report': ['templates/*.html'],
        'stylestats.web': ['templates/*.html'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Quality Assurance',
        'Topic :: Text Processing :: Markup',
    ],
    python_requires='>=3.10',
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'stylestats=stylestats.main:run',
            'stylestats-web=stylestats.web.run:main',
        ],
    },
    keywords=[
        'css',
        'stylesheet',
        'statistics',
        'metrics',
        'lint',
        'selectors',
    ],
)
