# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="egg-lang",
    version="0.3.0",
    description="Egg: a small expression language with a recursive-descent parser and tree-walking evaluator",
    packages=find_namespace_packages(include=["egg", "egg.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["egg = egg.__main__:main"],
    },
    zip_safe=False,
)
