
from setuptools import setup, find_packages

setup(
    name="color_shape_links",
    version="0.1",
    description="ColorShapeLinks board game with a minimax alpha-beta AI",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "rich",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "color-shape-links=color_shape_links.cli:main",
        ],
    },
)
