from setuptools import setup
from setuptools import find_packages
import os

version = '0.1'

here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.rst')).read()
CHANGES = open(os.path.join(here, 'CHANGES.rst')).read()


setup(name='mandelq',
      version=version,
      description="Row-queue Mandelbrot renderer writing 16 bit PPM images",
      long_description=README + CHANGES,
      classifiers=[],
      keywords='mandelbrot fractal ppm threads',
      author='whit',
      author_email='',
      url='',
      license='',
      packages=find_packages(exclude=['ez_setup', 'examples']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.8',
      install_requires=[
          'PyYAML',
          'cliff',
          'gevent',
          'numpy',
          'path',
          ],
      extras_require={
          'tests': [
              'mock',
              'pytest',
              ],
          },
      entry_points="""
      [console_scripts]
      mandelq=mandelq.cli:main

      [mandelq.cli]
      render=mandelq.cli:Render
      rows=mandelq.cli:Rows
      """,
      )
