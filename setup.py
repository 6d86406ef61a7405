from setuptools import setup, find_packages

setup(
    name="dlt-analysis",
    version="1.0.0",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "marshmallow>=3.13.0",
        "PyYAML"
    ],
    extras_require={
        "test": ["pytest"]
    },
    python_requires=">=3.8",
)
