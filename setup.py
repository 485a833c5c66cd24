#!/usr/bin/env python
"""Setup.py for GlueClone: Copy AWS Glue Workflows across regions or under a prefix"""

from setuptools import setup, find_namespace_packages

# Readme
with open("README.md", "r") as f:
    readme = f.read()

# Requirements
with open("requirements.txt", "r") as f:
    install_requires = f.read().strip().split("\n")

# Extra requirements
extras_require = {
    "dev": ["pytest", "pytest-sugar", "coverage", "pytest-cov", "flake8", "black"],
}

setup(
    name="glueclone",
    version="0.1.0",
    description="GlueClone: Copy AWS Glue Workflows (triggers, jobs, crawlers) across regions or under a prefix",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="SuperCowPowers LLC",
    author_email="support@supercowpowers.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    license="MIT",
    keywords="AWS, Glue, Workflow, Python, Utilities",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Utilities",
    ],
    entry_points={
        "console_scripts": [
            "glueclone-region = glueclone.scripts.copy_workflow_region:main",
            "glueclone-prefix = glueclone.scripts.copy_workflow_prefix:main",
            "glueclone-config = glueclone.scripts.show_config:main",
        ]
    },
)
