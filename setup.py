""" digisig build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import digisig

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=digisig.name,
    version=digisig.__version__,
    license=digisig.__license__,
    author=digisig.__author__,
    author_email=digisig.__author_email__,
    description="GOST R 34.10-2012 elliptic curve digital signatures",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"digisig": ["ecc/data/*.json"]},
    install_requires=["gostcrypto"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "cryptography elliptic-curves digital-signature gost "
        "GOST-R-34.10-2012 streebog RFC-7091"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
