"""
Setup script for shapegraph: in-memory shape graph model for diagram editors
"""

from setuptools import setup, find_packages

setup(
    name="shapegraph",
    version="1.0.0",
    description="Shape graph model and JSON/XPDL adapters for browser-based diagram editors",
    long_description="Shape graph model for a diagram-editing server: shapes, bounds, dockers, containment and adjacency, with JSON import/export and XPDL attribute adapters",
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests*", "docs*", "examples*"]),
    python_requires=">=3.9",
    install_requires=[
        # Core dependencies
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",

        # XML processing
        "lxml>=4.9.0",

        # Graph analysis
        "networkx>=3.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=1.0.0",
            "flake8>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "shapegraph=shapegraph.cli:main",
        ],
    },
    include_package_data=True,
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="diagram shape-graph bpmn xpdl editor",
)
