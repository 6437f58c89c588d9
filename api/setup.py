from setuptools import setup, find_packages

setup(
    name='graph-animator-api',
    version='1.0.0',
    description='Models, containers and Board contract for Graph Animator',
    packages=find_packages(),
    python_requires='>=3.10',
)
