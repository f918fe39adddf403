from setuptools import setup, find_packages


setup(
    name = "ordtree",
    version = "0.1.0",
    description = "Unbalanced binary search tree with parent links, "
                  "successor queries and iterative traversal",
    packages = find_packages(exclude=["tests", "tests.*"]),
    python_requires = ">=3.6",
    extras_require = {
        "test": [
            "pytest",
            "hypothesis",
            ],
        },
)
