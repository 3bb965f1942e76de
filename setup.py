from setuptools import setup, find_packages

setup(
    name="seam_rpc",
    version="0.1.0",
    description="JSON-RPC 2.0 client over HTTP with JSON and MessagePack encodings",
    author="Seam RPC Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "httpx>=0.24.0",
        "msgpack>=1.0.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-benchmark",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
