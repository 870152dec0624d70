from setuptools import setup, find_packages

setup(
    name="cellkit",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "openpyxl>=3.1.0",
    ],
    extras_require={
        "testing": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cellkit=cellkit.cli:main",
        ],
    },
    python_requires=">=3.10",
)
