# -*- coding: utf-8 -
import os
from setuptools import setup, find_packages


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name="knife-vagrant",
    version=read("knife_vagrant/version.txt").strip(),
    description="Spin up vagrant boxes and test chef run lists on them",
    license="GPL-3.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        ],
    keywords="Vagrant, Chef, Testing",
    long_description=read("README.rst"),
    packages=find_packages(),
    python_requires=">=3.8",
    install_requires=[
        "python-vagrant>=1.0.0",
        "jinja2>=3.0",
        "jsonschema>=3.2",
        "requests>=2.18.0",
        "cryptography>=3.1",
        "pyyaml>=5.1",
        "click>=8.0",
        "rich>=10.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "ddt",
        ],
    },
    entry_points={
        "console_scripts": [
            "knife-vagrant = knife_vagrant.cli:main",
        ],
    },
    package_data={"knife_vagrant": ["Vagrantfile.j2", "version.txt"]},
    include_package_data=True
)
