from setuptools import find_packages, setup


def readme():
    with open("README.md", encoding="utf-8") as f:
        return f.read()

setup(
    name="wasteland",
    version="1.0.0",
    packages=find_packages(
        include=[
            "wasteland",
            "wasteland.*",
        ]
    ),
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "black>=21.0.0",
            "flake8>=3.9.0",
        ],
    },
    include_package_data=True,
    python_requires=">=3.9",
    description="Step counting over left/right node maps with a repeating instruction cycle",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="puzzle, graph traversal, lcm",
    entry_points={
        "console_scripts": [
            "wasteland-run=wasteland.main:main",
        ],
    },
)
