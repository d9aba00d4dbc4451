"""Setup file for the ElasticPress Configuration package."""

from setuptools import setup, find_packages

setup(
    name="elasticpress-config",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "diskcache",
        "pydantic>=2",
        "rich",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "ep-config=elasticpress_config.__main__:main",
        ],
    },
    author="Pimentel",
    author_email="pimentel@example.com",
    description="Configuration accessor for an Elasticsearch integration of a multi-site CMS",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
)
