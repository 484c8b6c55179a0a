import setuptools


def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        readme = fh.read()
    return readme


def read_version():
    """Read the version string from `seqphragmen/__init__.py`.

    The version is stored in a line of the form

    __version__ = "1.0.0"

    and has to comply with PEP 440.
    """
    with open("seqphragmen/__init__.py", "r", encoding="utf-8") as fh:
        for line in fh:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"')
    raise RuntimeError("Version string not found in seqphragmen/__init__.py.")


setuptools.setup(
    name="seqphragmen",
    version=read_version(),
    description="Multi-winner approval elections with Phragmen's sequential rule",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    license="MIT License",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
    ],
    packages=["seqphragmen"],
    python_requires=">=3.8",
    install_requires=[
        "networkx>=2.2",
        "numpy>=1.20",
    ],
    extras_require={
        "gmpy2": [
            "gmpy2>=2.1",
        ],
        "dev": [
            "pytest>=6",
            "coverage[toml]>=5.3",
            "black>=22.1.0",
            "ruamel.yaml >= 0.16.13",
        ],
    },
)
