# setup.py
from setuptools import setup, find_packages

setup(
    name="unity-markup",              # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(include=["unity_markup", "unity_markup.*"]),
    python_requires=">=3.9",
    install_requires=["pandas"],      # tabular error reports
    extras_require={"test": ["pytest"]},
    include_package_data=True,        # so we can bundle the sample documents
    package_data={
        "unity_markup.samples": ["*.json"],
    },
    entry_points={
        "console_scripts": ["unity-validate=unity_markup.cli:main"],
    },
    description="Validator for Unity markup: XML-Infoset-like documents encoded in JSON",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
