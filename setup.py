#!/usr/bin/env python3
"""
Setup script for editor-command. Package metadata lives in pyproject.toml.
"""

import sys

from setuptools import find_packages, setup


def _requirements(deps: dict) -> list[str]:
    requires = []
    for dep, version_spec in deps.items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            requires.append(f"{dep}{version_spec}")
        else:
            requires.append(dep)
    return requires


try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]
    test_deps = poetry.get("group", {}).get("test", {}).get("dependencies", {})
    entry_points = [f"{name} = {target}" for name, target in poetry.get("scripts", {}).items()]

    setup(
        name=poetry["name"],
        version=poetry["version"],
        description=poetry["description"],
        author=poetry["authors"][0],
        license=poetry["license"],
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=_requirements(poetry["dependencies"]),
        extras_require={"test": _requirements(test_deps)},
        entry_points={"console_scripts": entry_points},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except (OSError, KeyError) as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
