# setup.py
from setuptools import setup, find_packages

setup(
    name="teko",
    version="0.4.0",
    description="Evaluator core of Teko, a small dynamically scoped Lisp",
    packages=find_packages(include=["teko", "teko.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["teko = teko.__main__:main"],
    },
    zip_safe=False,
)
