import io
import re
from setuptools import setup, find_packages

with open('metapartition/__init__.py') as fd:
    __version__ = re.search("__version__ = '(.*)'", fd.read()).group(1)

def read(*filenames, **kwargs):
    encoding = kwargs.get('encoding', 'utf-8')
    sep = kwargs.get('sep', '\n')
    buf = []
    for filename in filenames:
        with io.open(filename, encoding=encoding) as f:
            buf.append(f.read())
    return sep.join(buf)


long_description = read('README.md')


setup(
    name='metapartition',
    version=__version__,
    python_requires='>=3.6',
    license='BSD',
    install_requires=[
        'numpy>=1.16',
        'scipy>=1.3.0',
        'networkx>=2.4',
    ],
    extras_require={
        'kahypar': ['kahypar>=1.1.4'],
        'mtkahypar': ['mtkahypar'],
        'test': ['pytest', 'tox'],
        'docs': ['sphinx', 'sphinx-rtd-theme'],
    },
    description='Hypergraph container, traversal and meta-partitioner over '
                'hMetis, KaHyPar and mt-KaHyPar',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['test', 'test.*']),
    platforms='any',
    classifiers=[
        'Programming Language :: Python',
        'Development Status :: 4 - Beta',
        'Natural Language :: English',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ]
)
