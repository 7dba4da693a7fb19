from pathlib import Path

from setuptools import setup, find_packages

# Read version from the package without importing it (runtime deps may be absent at build time)
_version_ns: dict = {}
exec((Path(__file__).parent / "adder" / "version.py").read_text(encoding="utf-8"), _version_ns)
__version__ = _version_ns["__version__"]

setup(
    name="adder",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    python_requires=">=3.10",
)
