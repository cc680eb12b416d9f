from setuptools import setup, find_packages
import os

# Read README.md if it exists
long_description = ''
if os.path.exists('README.md'):
    with open('README.md', encoding='utf-8') as f:
        long_description = f.read()

# Read requirements.txt
requirements = []
if os.path.exists('requirements.txt'):
    with open('requirements.txt', encoding='utf-8') as f:
        requirements = [line.strip() for line in f
                       if line.strip() and not line.startswith('#')]

setup(
    name="hexlattice",
    version="0.1.0",
    packages=find_packages(exclude=['tests', 'tests.*', 'examples', 'examples.*']),
    install_requires=requirements,
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
        ],
    },
    python_requires=">=3.8",
    description="Accessor, summary and plotting utilities for lattices of regular hexagons",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: GIS",
    ],
    keywords="hexagon, lattice, geospatial, geopandas, shapely",
    zip_safe=False,
)
