from setuptools import setup, find_packages

setup(
    name="argline",
    version="0.1.0",
    description="Grammar-driven tokenizer and prefix command shell for chat-style command lines.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argline", "argline.*"]),
    python_requires=">=3.10",
    install_requires=[
        "prompt_toolkit>=3.0.44",
        "pydantic>=2.0",
        "python-json-logger>=3.1",
        "pyyaml>=6.0",
        "rich>=13.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "argline=argline.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
