# setup.py
from setuptools import setup, find_packages
import os
import sys

# Define a version fallback in case the file can't be read
version = {'__version__': '1.0.0'}  # Default version

# Try reading version from the package's core __init__ file if it exists
version_file_path = "cyto_profile/core/__init__.py"
try:
    if os.path.exists(version_file_path):
        with open(version_file_path) as fp:
            exec(fp.read(), version)
    else:
        print(f"Warning: {version_file_path} not found. Using default version.", file=sys.stderr)
except Exception as e:
    print(f"Warning: Could not read version from {version_file_path}: {e}", file=sys.stderr)

# Read the long description from README.md
try:
    with open('README.md', encoding='utf-8') as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "Exploratory analysis and biomarker screening for cytokine/immune-assay panels."  # Fallback

base_requires = [
    "numpy",
    "pandas",
    "scipy",  # Welch's t-test
]

setup(
    name="cyto_profile",
    version=version['__version__'],
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=base_requires,
    extras_require={
        'dev': [  # Development/testing tools
            'pytest',
        ],
    },
    description="Exploratory analysis and biomarker screening for cytokine/immune-assay panels.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
    ],
    python_requires='>=3.9',
)
