"""Setup script for the Tube Videos catalog manager."""

from setuptools import setup, find_namespace_packages

setup(
    name="tubecatalog",
    version="0.1.0",
    description="In-memory catalog of videos and playlists with static page generation",
    author="Micah Alpern",
    author_email="malpern@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    install_requires=[
        "python-dotenv>=1.0.0",
        "tqdm>=4.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tubecatalog=tubecatalog.cli:main",
        ]
    },
)
