"""Setup script for ytvideo."""

from pathlib import Path

from setuptools import find_packages, setup

with Path("README.md").open() as file:
    long_description = file.read()

setup(
    name="ytvideo",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Python library for reading, updating, rating and analysing a "
    "YouTube video through the YouTube Data and Analytics APIs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=[
        "httpx~=0.28.1",
        "xmltodict~=0.14.2",
        "isodate~=0.7.2",
        "python-dotenv~=1.0",
        "typing_extensions>=4.4; python_version < '3.12'",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0",
            "respx~=0.22.0",
        ],
    },
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
