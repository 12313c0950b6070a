from setuptools import setup, find_packages

setup(
    name="connect4_minimax",
    version="0.1.0",
    description="Fixed-depth minimax move selector for Connect Four",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
