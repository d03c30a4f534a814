import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pysobol",
    version="1.0.0",
    description="Sobol variance based sensitivity indices from model "
    "evaluations at Saltelli sample sets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        'numpy >= 1.16.4',
        'scipy >= 1.0.0',
    ],
    extras_require={
        'tests': ['coverage>=6.4', 'pytest-cov', 'pytest>=4.6'],
    },
    license='MIT',
)

# to run a single test with pytest use
# pytest pysobol/analysis/tests/test_sobol_analysis.py -k test_hand_computed_analysis

# run a doctest of a single module
# pytest -v --doctest-modules pysobol/util/utilities.py
