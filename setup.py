from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="tildecrypt",
    version="1.0.0",
    packages=find_packages(include=["tildecrypt", "tildecrypt.*"]),
    install_requires=[
        "cryptography>=41.0.0",
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tildecrypt=tildecrypt.main:main",
        ],
    },
    python_requires=">=3.10",
    description="Single-field text codec: '~'-tagged AES-256-CBC in the OpenSSL salted format",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
