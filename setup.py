# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="functorkit",
    version="1.0.0",
    description="Functor instances for binary trees, sequences, options, mappings and functions",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["functorkit*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        'console_scripts': [
            'functorkit=functorkit.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
