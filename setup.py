"""Setup configuration for service_bootstrap package"""

from setuptools import setup, find_packages

setup(
    name="service-bootstrap",
    version="0.1.0",
    description="All-or-nothing acquisition and release of database, cache and broker connections",
    author="Juan Wills",
    packages=find_packages(include=["service_bootstrap", "service_bootstrap.*", "config", "scripts"]),
    python_requires=">=3.10",
    install_requires=[
        "dagster>=1.11.14",
        "pydantic>=2.0",
        "python-dotenv>=1.0.0",
        "psycopg2-binary>=2.9.9",
        "valkey>=6.0.0",
        "kombu>=5.3.0",
        "pymongo>=4.6.0",
    ],
    extras_require={
        "dev": [
            "black>=25.9.0",
            "pytest>=8.4.2",
        ],
    },
    entry_points={
        "console_scripts": [
            "service-bootstrap-check=scripts.setup_check:main",
        ],
    },
)
