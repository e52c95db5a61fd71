"""
Setup file.
"""

from setuptools import find_packages, setup

KEYWORDS = "ios native assets lipo fat binary dylib build"


if __name__ == "__main__":
    setup(
        name="nativeassets",
        version="0.1.0",
        description="Native code assets for multi-architecture iOS app builds.",
        keywords=KEYWORDS,
        package_dir={"": "src"},
        packages=find_packages("src"),
        python_requires=">=3.10",
        install_requires=[],
        extras_require={"test": ["pytest"]},
        include_package_data=True)
