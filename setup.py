from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="radiolinks",
    version="0.1.0",
    author="OpenBTS Team",
    description="Duplex microwave link reconstruction from unidirectional permit records",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["radiolinks", "radiolinks.*"]),
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "radiolinks-build=radiolinks.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Telecommunications Industry",
        "Programming Language :: Python :: 3.11",
    ],
)
