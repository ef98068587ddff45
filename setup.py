# setup.py
from setuptools import setup, find_packages

setup(
    name="tinylisp",
    version="0.1.0",
    description="A minimal Lisp interpreter: reader, evaluator, closures",
    packages=find_packages(include=["tinylisp", "tinylisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tinylisp=tinylisp.__main__:main"],
    },
    zip_safe=False,
)
