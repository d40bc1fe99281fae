#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

setup(
    name='couchdb-client',
    version='0.1.0',
    description='Python client library for the CouchDB HTTP/JSON API',
    long_description="""
    This is a Python client for CouchDB. It maps databases, documents and
    design documents (views) onto objects and translates HTTP errors into
    typed exceptions.""",
    license = 'BSD',
    classifiers = [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database :: Front-Ends',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages = ['couchdb_client', 'couchdb_client.tests'],
    python_requires='>=3.6',
    install_requires=[
        "furl",
        "requests",
        "requests_toolbelt",
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
)
