from setuptools import setup, find_packages

setup(
    name='parity_pyramid',
    version='0.1.0',  # Starting version
    description='Maximum-sum path through a number triangle whose values alternate between odd and even',

    packages=find_packages("src"),
    package_dir={"":"src"}, 
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["parity-pyramid=parity_pyramid.cli:main"],
    },

)
