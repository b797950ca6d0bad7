from setuptools import setup, find_packages

setup(
    name="cfn-changeset-update",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "boto3",
        "botocore",
        "pydantic>=2",
        "rich",
        "typer",
        "cli-core-yo>=1.3.1,<2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cfn-update=cfn_update.cli:main",
        ],
    },
)
