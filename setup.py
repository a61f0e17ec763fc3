from importlib.machinery import SourceFileLoader

import toml
from setuptools import find_packages, setup

version = SourceFileLoader("__version__", "sortparams/__init__.py").load_module()

setup_variables = toml.load("pyproject.toml")["project"]

setup(
    name=setup_variables["name"],
    version=str(version.__version__),
    classifiers=setup_variables["classifiers"],
    packages=find_packages(include=["sortparams", "sortparams.*"]),
    install_requires=setup_variables["dependencies"],
    description=setup_variables["description"],
)
