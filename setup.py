"""Setup script for plugin_logger"""

from pathlib import Path

from setuptools import setup, find_packages

here = Path(__file__).parent
readme = here / "README.md"

setup(
    name="plugin-logger",
    version="1.0.0",
    author="kcenon",
    author_email="kcenon@naver.com",
    description=(
        "Pluggable application logger: one formatting and serialized-write "
        "core, with console, rotating file and in-memory backends"
    ),
    long_description=readme.read_text(encoding="utf-8") if readme.exists() else "",
    long_description_content_type="text/markdown",
    keywords=["logging", "logger", "rotating-file", "backend"],
    packages=find_packages(include=["plugin_logger", "plugin_logger.*"]),
    python_requires=">=3.8",
    # Standard library only
    install_requires=[],
    extras_require={
        "dev": ["pytest>=7.0.0", "pytest-cov>=4.0.0", "black>=23.0.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Logging",
    ],
)
