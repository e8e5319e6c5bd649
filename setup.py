#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name='cq-post',
    version='0.1',
    description='G-code post processors with modal suppression',
    author='Matti Eiden',
    author_email='snaipperi@gmail.com',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.9',
    install_requires=[],
    extras_require={'test': ['pytest']},
)
