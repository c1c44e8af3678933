"""
Setup script for the termloop concurrent terminal runtime.
"""

from setuptools import setup, find_packages

setup(
    name="termloop",
    version="0.1.0",
    description="Concurrent dispatch/render runtime for interactive terminal applications",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="termloop contributors",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.0.0",
        "prompt_toolkit>=3.0.36",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "termloop-demo=termloop.main:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
