from pathlib import Path

from setuptools import find_packages, setup

setup(
    name='landau',
    version='1.0.0',
    packages=find_packages(include=['landau', 'landau.*']),
    license='GPLv3',
    description='Fast evaluation of and sampling from the Landau distribution',
    long_description=(Path(__file__).parent / 'README.rst').read_text(),
    keywords=['Landau', 'energy loss', 'probability distribution'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Physics',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
    entry_points={
        'console_scripts': [
            'landau_evaluate = landau.cli:evaluate',
            'landau_simulate = landau.cli:simulate',
        ],
    },
    install_requires=['numpy', 'scipy', 'tables>=3.3.0', 'progressbar2>=3.7.0'],
    extras_require={'dev': ['Sphinx', 'ruff', 'coverage', 'mock'],
                    'test': ['mock']},
)
