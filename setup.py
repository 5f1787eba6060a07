import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")

TEST_REQUIRES = [
    "pytest>=7.0.0",
    "pytest-cov>=4.0.0",
]


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="yaml_schema_to_code",
    version="1.0.0",
    description="Generate data-access code from YAML table schemas through Jinja2 templates",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Database",
        "Intended Audience :: Developers",
    ],
    keywords="yaml schema code generation dao dto template jinja2",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": TEST_REQUIRES,
        "dev": TEST_REQUIRES + ["ruff>=0.1.0"],
    },
    entry_points={
        "console_scripts": [
            "yaml_schema_to_code=yaml_schema_to_code.yaml_schema_to_code:yaml_schema_to_code",
        ],
    },
    zip_safe=False,
)
