import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pointvector",
    version="0.1.0",
    author="pointvector developers",
    description="Fixed size, n-dimensional point and vector value types",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords=['geometry', 'point', 'vector', 'dot product', 'cross product'],
    install_requires=[
        "numpy>=1.24.4",
        "json_tricks>=3.12.1",
        ],
    extras_require={
        'test': ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'pointvector-demo = pointvector.demo:main',
        ],
    },
)
