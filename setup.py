# Copyright (C) 2023 Jae-Won Chung <jwnchung@umich.edu>
# 
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
# 
#     http://www.apache.org/licenses/LICENSE-2.0
# 
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from setuptools import setup, find_packages

setup(
    name="augflow",
    version="0.0.1",
    description="Maximum flow with augmenting paths over a residual graph",
    long_description="# Augflow: Maximum flow with augmenting paths over a residual graph\n",
    long_description_content_type="text/markdown",
    url="https://github.com/SymbioticLab/augflow",
    author="Jae-Won Chung",
    author_email="jwnchung@umich.edu",
    license="Apache-2.0",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    keywords=["max-flow", "graph", "ford-fulkerson"],
    packages=find_packages(".", include=["augflow", "augflow.*"]),
    install_requires=[
        "attrs>=22.2.0",
        "matplotlib>=3.6.2",
        "networkx>=3.0",
        "numpy>=1.23.4",
        "pandas>=1.5.3",
    ],
    python_requires=">=3.9",
    extras_require={
        "dev": ["ruff", "black==22.10.0", "mypy==1.1.1", "pytest"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["augflow=augflow.cli:main"],
    },
)
