# setup.py
from setuptools import setup, find_packages

setup(
    name="scheme",
    version="0.1.0",
    description="A small Scheme front end with a tree-walking interpreter and an x86-64 code generator",
    packages=find_packages(include=["scheme", "scheme.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "scheme-interpret=scheme.cli:interpret_main",
            "scheme-compile=scheme.cli:compile_main",
        ],
    },
    zip_safe=False,
)
