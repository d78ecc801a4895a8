from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="xxteafile",
    version="1.0.0",
    packages=find_packages(include=["xxteafile", "xxteafile.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["xxteafile=xxteafile.main:main"],
    },
    python_requires=">=3.10",
    description="Encrypt and decrypt files with XXTEA in independent 512-byte blocks",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
