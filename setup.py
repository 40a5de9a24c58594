"""
Setup script for spmat

spmat is pure Python; numpy is the only runtime requirement. scipy is
optional and only needed for SparseMatrix.to_scipy().
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/spmat/__init__.py
def get_version():
    version_file = Path("src/spmat/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="spmat",
    version=get_version(),
    description="Shared contract for sparse-matrix storage formats",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "scipy": ["scipy>=1.7"],
        "test": ["pytest>=7", "scipy>=1.7"],
    },
    zip_safe=True,
)
