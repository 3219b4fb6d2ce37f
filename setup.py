"""
kafka-ready Setup
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="kafka-ready",
    version="0.1.0",
    author="kafka-ready Contributors",
    author_email="",
    description="Readiness probe that waits for a Kafka cluster to report a minimum number of brokers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Distributed Computing",
        "Topic :: System :: Monitoring",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords=[
        "kafka", "readiness", "healthcheck", "probe", "docker",
        "kubernetes", "message-broker", "distributed-systems"
    ],
    python_requires=">=3.8",
    install_requires=[
        "confluent-kafka>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=3.0",
            "black>=22.0",
            "pylint>=2.0",
            "mypy>=0.990",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kafka-ready=kafka_ready.cli:main",
        ],
    },
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
