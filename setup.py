from setuptools import setup, find_packages


setup(
    name='disjoint-registry',
    version='0.1.0',
    description='A fixed-capacity union-find registry over arbitrary items.',
    packages=find_packages(include=['disjoint_registry', 'disjoint_registry.*']),
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={
        'test': ['pytest'],
    },
)
