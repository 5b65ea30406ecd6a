# setup.py
from setuptools import setup, find_packages

setup(
    name="qlisp",
    version="0.3.0",
    description="A small Lisp with S- and Q-expressions, closures and currying",
    packages=find_packages(include=["qlisp", "qlisp.*"]),
    package_data={"qlisp": ["prelude/*.lisp"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["qlisp = qlisp.repl:main"],
    },
    zip_safe=False,
)
