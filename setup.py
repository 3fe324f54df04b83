from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyimgproc",
    version="0.0.1",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="GPU packed-pixel image transforms: squash, channel rotation, blur, expand",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyimgproc", "pyimgproc.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    python_requires=">=3.10",
    install_requires=[
        "taichi>=1.4.0",
        "numpy>=1.20.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="image processing pixel blur upsample downsample GPU taichi",
    entry_points={
        "console_scripts": [
            "pip-squash=pyimgproc.cli.transform_commands:squash",
            "pip-rotate=pyimgproc.cli.transform_commands:rotate",
            "pip-blur=pyimgproc.cli.transform_commands:blur",
            "pip-expand=pyimgproc.cli.transform_commands:expand",
        ],
    },
)
