# setup.py
from setuptools import setup, find_packages

setup(
    name="cadr",
    version="0.1.0",
    description="A small Scheme-family interpreter built on cons cells",
    packages=find_packages(include=["cadr", "cadr.*"]),
    package_data={"cadr": ["prelude/*.scm"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
