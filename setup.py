#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="vectorgeometry",
    version="0.1.0",
    description="2D vector-graphics geometry kernel - affine transforms, shape bounds and path boolean operations with NumPy",
    author="VectorGeometry Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "plot": ["matplotlib>=3.3"],
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
