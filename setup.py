from setuptools import setup, find_packages
import os

setup(
    name="EIGENtools",
    version="0.1.0",
    author="James R. Beattie and Collaborators",
    author_email="james.beattie@princeton.edu",
    description="A toolkit (JIT compiled) for dense real eigenvalue and eigenvector decompositions",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        # Core scientific computing dependencies
        "numpy>=1.20.0",
        # JIT compilation and parallelization
        "numba>=0.56.0",
        "joblib>=1.0.0",
    ],
    extras_require={
        # Test suite (scipy provides reference eigenvalues)
        "test": [
            "pytest>=7.0",
            "scipy>=1.7.0",
        ],
        # Documentation tools
        "docs": [
            "sphinx>=4.0",
            "sphinx-rtd-theme>=1.0",
            "numpydoc>=1.1",
        ],
        # Complete installation with all optional features
        "all": [
            "numpy>=1.20.0",
            "numba>=0.56.0",
            "joblib>=1.0.0",
            "scipy>=1.7.0",
            "pytest>=7.0",
            "sphinx>=4.0",
            "sphinx-rtd-theme>=1.0",
            "numpydoc>=1.1",
        ],
    },
    # Include package data
    include_package_data=True,
    package_data={
        "EIGENtools": ["*.txt", "*.md"],
    },
    zip_safe=False,
)
