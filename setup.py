#!/usr/bin/env python
from setuptools import setup, find_packages


with open("README.md", encoding="utf-8") as f:
    long_description = f.read()


setup(
    name="snapundo",
    description="Snapshot based undo/redo and recently-visited tracking for an observed record.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    use_scm_version={"write_to": "Lib/snapundo/_version.py", "fallback_version": "0.1.0"},
    license="MIT",
    package_dir={"": "Lib"},
    packages=find_packages("Lib"),
    install_requires=[
        'dataclasses;python_version<"3.7"',
    ],
    extras_require={
        "test": ["pytest"],
    },
    setup_requires=["setuptools_scm"],
    python_requires=">=3.6",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
    ],
)
