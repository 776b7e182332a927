from setuptools import setup, find_packages
import ptgen


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='ptgen',
    description="Parse tree generator for the PTL expression language",
    long_description=long_description,
    version=ptgen.__version__,
    author='Windel Bouwman',
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    install_requires=[],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'ptgen = ptgen.cli.ptgen:ptgen',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Compilers',
        'Topic :: Text Processing :: Markup :: LaTeX',
    ]
)
