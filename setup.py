import setuptools

setuptools.setup(
    name="scalability-modeling",
    version="0.1.0",
    description=(
        "Reconciles, validates and prices scaling bounds (flavors and instance "
        "counts) for cloud applications"
    ),
    python_requires=">=3.11,<3.13",
    packages=setuptools.find_packages(exclude=("tests*",)),
    install_requires=[
        "pydantic>2.0",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    entry_points={
        "console_scripts": [
            "scale = scalability_modeling.tools.scale:main",
        ]
    },
    include_package_data=True,
    package_data={
        "": [
            "flavors/profiles/*.json",
        ]
    },
)
