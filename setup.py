from setuptools import setup, find_packages

setup(
    name="gomoku",
    version="0.1.0",
    packages=find_packages(include=["gomoku", "gomoku.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
