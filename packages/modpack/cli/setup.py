from setuptools import find_namespace_packages, setup

# Physical structure matches import path (modpack.cli.*)
packages = find_namespace_packages(where="../..", include=["modpack.cli", "modpack.cli.*"])

setup(
    name="modpack-cli",
    version="0.1.0",
    packages=packages,
    package_dir={"": "../.."},
    install_requires=["modpack-core", "rich>=13.0"],
    entry_points={"console_scripts": ["modpack = modpack.cli.main:main"]},
)
