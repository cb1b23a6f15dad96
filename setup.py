from setuptools import setup, find_packages

setup(
    name="relvar",
    version="0.1.0",
    packages=find_packages(include=['relvar', 'relvar.*']),
    install_requires=[
        'pyyaml>=5.4.1',
        'pydantic>=2.0',
        'pandas>=1.3.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
    description="Typed, validated tuple collections with persistable headings",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
)
