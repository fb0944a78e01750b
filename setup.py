from setuptools import setup, find_packages

setup(
    name="wordselect-grading",
    version="0.1.0",
    description="Tokenizes, scores and aggregates attempts at select-the-correct-words questions",
    author="Sumit Asthana",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"wordselect.config": ["*.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "structlog>=23.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
)
