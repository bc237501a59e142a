from setuptools import setup, find_packages

setup(
    name="inscrib3-client",
    version="1.0.0",
    description="Async client SDK for the Inscrib3 drops API",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "httpx>=0.25.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    python_requires=">=3.10",
)
