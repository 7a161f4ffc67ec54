from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="schedgraph",
    version="0.3.0",
    author="Andrey Golovanov",
    description="Dependency-graph analysis for task scheduling: SCCs, topological order, critical paths.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "dev", "examples")),
    package_data={"schedgraph": ["schemas/*.json"]},
    python_requires=">=3.10",
    install_requires=[
        "networkx",
        "numpy",
        "pyyaml",
        "jsonschema",
    ],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["schedgraph=schedgraph.cli:main"]},
)
