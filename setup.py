#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="gizmos",
        packages=find_packages(include=["gizmos", "gizmos.*"]),
        python_requires='>=3.10',
        version="0.1.0",
        license="MIT",
        description="Debug drawing (gizmos) with groups, layered configuration and per-frame rendering",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["gizmos", "debug", "visualization", "opengl"],
        classifiers=[],
        include_package_data=True,
        install_requires=[
            "numpy",
            "PyOpenGL>=3.1",
            "glfw>=2.5.0",
        ],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "gizmos-showcase=gizmos.__main__:main",
            ],
        },
        zip_safe=False,
    )
