from setuptools import setup
from posixargs.const import VERSION_STR, DESCRIPTION

setup(
    name="posixargs",
    version=VERSION_STR,
    python_requires='>=3.10',
    description=DESCRIPTION,
    packages=["posixargs"],
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "posixargs = posixargs:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
