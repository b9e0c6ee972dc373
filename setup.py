from setuptools import setup, find_packages

setup(
    name="jhome",
    version="0.1.0",
    description="Locate JAVA_HOME and the java/javac binaries inside it",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0",
        "tabulate>=0.8.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["jhome=jhome.cli:main"],
    },
    license="MIT",
)
