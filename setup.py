"""
ポートフォリオ用チェッカーのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="portfolio-checkers",
    version="1.0.0",
    description="チェッカー - ルールエンジンとミニマックスAI",
    author="",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.118.0",
        "uvicorn>=0.37.0",
        "pydantic>=2.11.10",
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "httpx>=0.24.0",
            "tqdm>=4.0.0",
        ],
        "tools": [
            "tqdm>=4.0.0",
        ],
    },
)
