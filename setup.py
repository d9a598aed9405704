"""Setup script for chksum."""

from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    """Read __version__ from the package without importing it."""
    init = Path(__file__).parent / "chksum" / "__init__.py"
    for line in init.read_text().splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip('"')
    raise RuntimeError("Unable to find __version__ in chksum/__init__.py")


setup(
    name="chksum-cli",
    version=read_version(),
    description="Compute, parse and verify checksums with pluggable hash algorithms",
    python_requires=">=3.10",
    packages=find_packages(include=["chksum", "chksum.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "chksum=chksum.__main__:main",
        ],
    },
)
