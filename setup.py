# setup.py
from setuptools import setup, find_packages

setup(
    name="egg-lang",
    version="0.1.0",
    description="Interpreter for Egg, a small expression-oriented language",
    packages=find_packages(include=["egg", "egg.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis>=6.82"],
    },
    entry_points={
        "console_scripts": ["egg=egg.cli:main"],
    },
    zip_safe=False,
)
