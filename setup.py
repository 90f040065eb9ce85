# -*- coding: utf-8 -*-
from setuptools import setup, find_packages


def read(relative):
    with open(relative, 'r') as requires:
        contents = requires.read()
    return [l for l in contents.split('\n') if l != '']


setup(
    name='pubthr',
    version='0.1.0',
    description='ZeroMQ send throughput microbenchmark',
    license='Apache 2.0',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Topic :: System :: Benchmark',
        'Topic :: System :: Networking',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython'
    ],
    python_requires='>=3.9',
    install_requires=read('./tools/pip-requires'),
    tests_require=read('./tools/test-requires'),
    extras_require={'test': read('./tools/test-requires')},
    zip_safe=False,
    include_package_data=True,
    packages=find_packages(exclude=['*.tests']),
    entry_points={
        'console_scripts': ['pubthr = pubthr.main:run']
    })
