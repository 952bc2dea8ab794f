#================================================================================
# Setup.py - Traditional Python Package Setup
# ================================================================================
# Installs the edge_admin package, its bundled dashboard document and the
# `edge-admin` console script.
#
# Install with: pip install -e .
# Dev/test:     pip install -e ".[dev]"
#

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="edge-admin",
    version="1.0.0",
    author="Your Team",
    author_email="team@example.com",
    description="DNS record proxy and operator dashboard for an edge provider",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/your-org/edge-admin",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"edge_admin": ["static/*.html"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Internet :: Name Service (DNS)",
    ],
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.104.0",
        "uvicorn[standard]>=0.24.0",
        "pydantic>=2.4.0",
        "pydantic-settings>=2.0.0",
        "httpx[http2]>=0.25.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "black>=23.11.0",
            "isort>=5.12.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
            "pre-commit>=3.5.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "edge-admin=edge_admin.main:main",
        ],
    },
)
