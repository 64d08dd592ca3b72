from setuptools import find_namespace_packages, setup

# Physical structure matches import path (modpack.core.*)
packages = find_namespace_packages(where="../..", include=["modpack.core", "modpack.core.*"])

setup(
    name="modpack-core",
    version="0.1.0",
    packages=packages,
    package_dir={"": "../.."},
    install_requires=["pydantic>=2.5", "PyYAML>=6.0"],
)
