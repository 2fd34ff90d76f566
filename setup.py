from setuptools import find_packages, setup
import os
import re

# Version configuration
with open(os.path.join("sgrfmt", "version.py")) as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)

# If in CI/CD (GitHub Actions), tag non-release builds with the commit
if os.environ.get("GITHUB_ACTIONS") == "true":
    if os.environ.get("GITHUB_REF", "").startswith("refs/tags/v"):
        tag = os.environ.get("GITHUB_REF", "").split("/")[-1]
        version = tag[1:]  # Remove 'v' prefix
        print(f"CI/CD release build using tag version: {version}")
    else:
        git_sha = os.environ.get("GITHUB_SHA", "")
        if git_sha:
            version = f"{version}.dev0+g{git_sha[:7]}"
        else:
            version = f"{version}.dev0"
        print(f"CI/CD build using version with git SHA: {version}")

setup(
    name="sgrfmt",
    version=version,
    description="Wrap text in SGR terminal color and style sequences",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=["sgrfmt", "sgrfmt.*"]),
    package_data={
        "sgrfmt": ["config/*.json"],
    },
    install_requires=[
        "click",
        "python-dotenv",
        "jsonschema",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ],
        "dev": [
            "black",
            "flake8",
            "flake8-docstrings",
            "isort",
            "mypy",
            "pre-commit",
            "types-jsonschema",
            "types-PyYAML",
        ],
    },
    entry_points={
        "console_scripts": [
            "sgrfmt=sgrfmt.cli.commands:cli",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Topic :: Terminals",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    include_package_data=True,
)
