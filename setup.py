from setuptools import setup, find_packages

setup(
    name="usercmd",
    version="0.1.0",
    description="Command-line manager for user records kept in a JSON file",
    packages=find_packages(include=["usercmd", "usercmd.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "tomli>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "usercmd=usercmd.cli:cli",
        ],
    },
)
