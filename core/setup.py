from setuptools import setup, find_packages

setup(
    name='graph-animator-core',
    version='1.0.0',
    description='Traversal engine, motion scheduler and editor platform for Graph Animator',
    packages=find_packages(),
    install_requires=[
        'graph-animator-api',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    python_requires='>=3.10',
)
