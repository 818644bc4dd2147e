import re

from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("relpath/_version.py", "r", encoding="utf-8") as fh:
    version = re.search(r"__version__ = \"([^\"]+)\"", fh.read()).group(1)

setup(
    name="relpath",
    version=version,
    description="Platform-neutral relative paths with a fixed '/' separator.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["PyYAML>=6.0"],
    extras_require={"test": ["pytest"]},
)
