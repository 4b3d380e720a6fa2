from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

INSTALL_REQUIRES = [
    "numpy>=1.26",
    "msgspec>=0.18",
    "tqdm>=4.66",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=8.0",
    ],
}


setup(
    name="benchcmp",
    version="0.1.0",
    description="Result comparison and parameter tokenization for command-line benchmarks",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
)
