# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='hdsl',
  version='0.0.1',
  description='hdsl generates a compact, type-checked Python builder API for HTML from curated element and attribute tables.',
  python_requires='>=3.11',
  packages=['hdsl', 'utest'],
  entry_points={'console_scripts': ['hdsl=hdsl.__main__:main']},
)
