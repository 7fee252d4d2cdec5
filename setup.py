"""Setup script for the journal citations package."""
from setuptools import setup, find_packages

setup(
    name="journal_citations",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.27.0",
        "flask>=2.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "journal-citations=journal_citations.__main__:main",
        ],
    },
    python_requires=">=3.8",
    description="Citation generation for Advances in Medicine & Health Sciences Journal articles",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="citation bibliography apa mla chicago vancouver bibtex journal",
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Text Processing :: Markup",
    ],
)
