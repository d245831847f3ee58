import re
from setuptools import setup, find_packages

with open("./README.md", "r") as f:
    description = f.read()

with open("./requirements.txt", 'r') as f:
    requirements = f.read().splitlines()

with open("./pycubie/__init__.py", 'r') as f:
    version = re.search(r'__version__ = "(.*?)"', f.read()).group(1)

setup(
    name="pycubie",
    version=version,
    author="Vivaan Singhvi",
    author_email='singhvi.vivaan@gmail.com',
    description="A four-phase Rubik's cube solver working on the cubie level",
    long_description=description,
    long_description_content_type="text/markdown",
    license='MIT',
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires='>=3.10',
    include_package_data=True,
    install_requires=requirements,
    extras_require={"test": ["pytest"]}
)
