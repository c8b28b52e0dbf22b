import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="PyRKELM",
    version="0.1.0",
    author="Peter Steiner",
    author_email="peter.steiner@tu-dresden.de",
    description="A scikit-learn-compatible Reduced Kernel Extreme Learning "
                "Machine in Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "examples"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
    ],
    keywords='PyRKELM, Reduced Kernel Extreme Learning Machine',
    install_requires=[
        'scikit-learn>=1.3',
        'numpy>=1.18.1',
        'scipy>=1.4.0',
        'joblib>=0.13.2',
        'pandas>=1.0.0',
    ],
    extras_require={
        'test': ['pytest'],
        'excel': ['openpyxl'],
    },
    python_requires='>=3.8',
)
