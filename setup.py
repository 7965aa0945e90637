from setuptools import setup
from setuptools import find_packages

long_description = open('README.md').read()

setup(
    name="httpcodex",
    version='0.1.0',
    description="HTTP status codes and status classes as closed enumerations",
    install_requires=[],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    packages=find_packages(include=['httpcodex', 'httpcodex.*']),
    include_package_data=True,
    package_data={'httpcodex': ['*.ini']},
    long_description=long_description,
    long_description_content_type='text/markdown'
)
