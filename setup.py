from setuptools import setup, find_packages

with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name="treewalk",
    version="0.1.0",
    description="Parser and syntax tree for the treewalk interpreted language",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['Tests']),
    python_requires='>=3.8',
    install_requires=['rply'],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        "console_scripts": [
            "treewalk = treewalk.driver:main"
        ]
    }
)
