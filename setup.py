from setuptools import setup, find_packages
import pdom


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='pdom',
    description="Immediate post dominator analysis for control flow graphs "
                "implemented in pure Python",
    long_description=long_description,
    version=pdom.__version__,
    author='Windel Bouwman',
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest', 'hypothesis', 'hypothesis-networkx', 'networkx'],
    },
    entry_points={
        'console_scripts': [
            'pdom = pdom.cli.pdom:pdom',
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
    ]
)
