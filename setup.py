#! /usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import os
from setuptools import setup, find_packages
from os.path import join as path_join, dirname as path_dirname


CURRDIR = path_dirname(__file__)

EXCLUDE_FROM_PACKAGES = ["tests", "tests.*"]

setup_args = dict(
    name='hostsmerge',
    version='0.0.1',
    packages=find_packages(exclude=EXCLUDE_FROM_PACKAGES),
    author='Huoty',
    author_email='sudohuoty@163.com',
    maintainer="Huoty",
    maintainer_email="sudohuoty@163.com",
    description='Merge ad-blocking hosts files',
    keywords=["hosts", "adblock", "dns"],
    zip_safe=False,
    license='Apache License v2',
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python',
        'Operating System :: Unix',
        'Programming Language :: Python :: 3',
    ],
)


def get_version():
    scope = {}
    version = '1.0'
    version_file = path_join(CURRDIR, "hostsmerge", "version.py")
    if os.path.exists(version_file):
        with open(version_file) as fp:
            exec(fp.read(), scope)
        version = scope.get('__version__', '1.0')
    return version


def main():
    setup_args["version"] = get_version()
    setup_args["install_requires"] = [
        "dnspython>=2.0",
        "PyYAML",
        "cacheout",
        "requests",
        "urllib3>=1.26",
    ]
    setup_args["extras_require"] = {
        "SOCKS": ["pysocks"],
        "test": ["pytest"],
    }
    setup_args["entry_points"] = {
        'console_scripts': [
            'hostsmerge=hostsmerge.cli:main',
        ],
    }

    setup(**setup_args)


if __name__ == "__main__":
    main()
