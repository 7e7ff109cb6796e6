from setuptools import setup, find_packages

setup(
    name="youtube_summarizer",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "aiohttp>=3.9.0",
        "requests>=2.31.0",
        "colorlog>=6.7.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.0.0",
        "langchain-core>=0.2.0",
        "langchain-openai>=0.1.0",
        "langchain-anthropic>=0.1.0",
        "langchain-google-genai>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "yt-summarize=youtube_summarizer.main:main",
        ],
    },
    python_requires=">=3.8",
    description="Fetch YouTube transcripts and summarize them with a language model",
    author="Venkatesh Murugadas",
    url="https://github.com/VenkateshDas/youtube_analysis",
)
