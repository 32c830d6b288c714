from setuptools import setup, find_packages

setup(
    name="windpark",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "pulp>=2.7.0",  # For the MILP planner
        "pyyaml>=5.4",  # For configuration files
        "fastapi>=0.100.0",
        "pydantic>=2.0",
        "uvicorn>=0.20.0",
    ],
    extras_require={
        'dev': [
            'pytest>=6.0.0',
            'httpx>=0.24.0',  # For FastAPI TestClient
            'black>=21.5b2',
            'mypy>=0.900',
        ],
    },
    entry_points={
        "console_scripts": [
            "windpark=windpark.main:main",
        ],
    },
    description="Production planning for a fleet of wind turbines under a market price floor",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Energy",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    zip_safe=False,
)
