from setuptools import setup, find_packages


setup(
    name="uniqseq",
    version="0.1",
    packages=find_packages(include=["uniqseq", "uniqseq.*"]),
    description="Unique pseudo-random integer sequences from quadratic-residue permutations, without a visited-set.",
    author="vercingetorx",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    entry_points={
        "console_scripts": [
            "uniqseq=uniqseq.cli:main",
        ]
    },
)
