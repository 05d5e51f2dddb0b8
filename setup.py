from setuptools import setup, find_namespace_packages

setup(
    name='NamePy',
    version='1.0',
    packages=find_namespace_packages(include=['NamePy', 'NamePy.*']),
    install_requires=[
        'typeguard',
        'typing_extensions'
    ],
    extras_require={
        'dev': ['mypy', 'pytest'],
        'test': ['pytest'],
    },
    package_data={
        'NamePy': ['py.typed']
    },
    zip_safe=False,  # Required for packages with type hints
)
