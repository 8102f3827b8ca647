from setuptools import setup, find_packages
from os import path
from io import open

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="brute_hull",
    version="0.1",
    packages=find_packages(include=["brute_hull", "brute_hull.*"]),
    include_package_data=True,

    install_requires=[
        "numpy>=1.22",
        "matplotlib>=3.5"
    ],

    extras_require={
        "test": [
            "pytest",
            "scipy"
        ]
    },

    entry_points={
        "console_scripts": [
            "brute-hull=brute_hull.cli:main"
        ]
    },

    license="MIT",
    description="""Brute-force convex hulls of finite sets of points in
    the plane""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
