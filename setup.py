from setuptools import setup, find_packages

setup(
    name="devil",
    version="0.1.0",
    description="Scaffold rust/c/c++ projects and render filtered directory trees",
    packages=find_packages(include=["devil", "devil.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "devil=devil.cli:main",
        ]
    },
)
