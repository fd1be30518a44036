from setuptools import setup, find_packages

setup(
    name="connect4x4",
    version="0.1.0",
    packages=find_packages(include=["connect4x4", "connect4x4.*"]),
    py_modules=["run"],
    install_requires=[
        "numpy",
        "gymnasium",
        "pygame",  # Graphical interface
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4x4=run:main",
        ],
    },
)
