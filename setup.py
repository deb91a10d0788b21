import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'README.md'), encoding='utf-8') as fh:
    long_description = '\n' + fh.read()

setup(
    name='py-steamid',
    version='1.0.0',
    license='Apache-2.0',
    author='SecorD',
    description='Parsing, validation and rendering of SteamIDs',
    long_description_content_type='text/markdown',
    long_description=long_description,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=['pretty-utils @ git+https://github.com/SecorD0/pretty-utils@main'],
    extras_require={'test': ['pytest']},
    keywords=['steam', 'steamid', 'steam id', 'csgo', 'kz'],
)
