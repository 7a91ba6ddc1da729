# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="VoxelShapes",
    version="0.1.0",
    description="Voxel shape samplers and greedy box-merge fills for block worlds",
    packages=find_namespace_packages(include=["engine", "world", "shapes", "tools"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["bench-shapes=tools.bench_shapes:_cli"],
    },
)
