"""Setup script for snoo Reddit API client"""

from setuptools import setup, find_packages

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(
    name='snoo',
    version='0.1.0',
    description='A small Reddit API client - look up things, submit and manage posts',
    author='Your Name',
    python_requires='>=3.10',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0.0'],
    },
    entry_points={
        'console_scripts': [
            'snoo=snoo.cli:cli',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
