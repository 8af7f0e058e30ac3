#!/usr/bin/env python

from setuptools import setup, find_namespace_packages

setup(
    name="python-nmdbus",
    version="0.1.0",
    description="Typed facade over the NetworkManager D-Bus API.",
    author="Proton AG",
    author_email="opensource@proton.me",
    url="https://github.com/ProtonVPN/python-nmdbus",
    packages=find_namespace_packages(include=["nmdbus*"]),
    include_package_data=True,
    install_requires=["dbus-python", "pygobject", "packaging"],
    extras_require={
        "development": ["wheel", "pytest", "pytest-cov", "pytest-asyncio", "flake8", "pylint"]
    },
    python_requires=">=3.8",
    license="GPLv3",
    platforms="OS Independent",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python",
        "Topic :: System :: Networking",
    ]
)
