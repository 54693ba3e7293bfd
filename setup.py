# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_scout",
    version="0.1.0",
    description="Tolerant robots.txt parser with anomaly tracking and permission queries",
    packages=find_packages(include=["robots_scout", "robots_scout.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.11",
)
