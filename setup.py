from setuptools import find_packages, setup

setup(
    name="check_cdap",
    version="1.0.0",
    packages=find_packages(exclude=("tests", "scripts")),
    python_requires=">=3.10",
    install_requires=[
        "httpx~=0.28",
        "pydantic~=2.11",
        "python-dotenv~=1.1",
    ],
    extras_require={
        # Test runner + fake server only
        "test": [
            "pytest~=8.4",
            "fastapi~=0.116",
        ],
        # Local dev & CI tools
        "dev": [
            "pytest~=8.4",
            "pytest-cov~=5.0",
            # fake CDAP router in tests/fake_cdap.py
            "fastapi~=0.116",
            "ruff~=0.13",
            "mypy~=1.11",
        ],
    },
    entry_points={
        "console_scripts": [
            "check_cdap=check_cdap.cli.check_cdap:main",
        ],
    },
    include_package_data=True,
)
