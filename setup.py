from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="moviecast",
    version="0.1.0",
    description="In-memory registry of movie casts with reverse lookup by actor",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "moviecast=moviecast.__main__:main",
        ],
    },
)
