import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("exactnum/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="exactnum",
    version=version,
    description="Exact and precision-preserving numbers. Rational, fixed-point-or-float, integer-or-float.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.8',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
            # exact arithmetic
            # fractions
            # decimal fixed point
    ],
)
