from setuptools import find_packages, setup

setup(
    name="cronitor-reconcile",
    version="0.1.0",
    license="Apache License 2.0",

    python_requires=">=3.12",
    description="Reconcile Cronitor monitors and notification lists with "
                "their declared state.",

    packages=find_packages(exclude=('cronitor_reconcile.test',
                                    'cronitor_reconcile.test.*')),

    install_requires=[
        "toml>=0.10.0,<0.11.0",
        "prometheus-client>=0.8",
        "requests>=2.27",
        "pydantic>=2.0,<3.0",
    ],

    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-httpserver>=1.0",
            "pytest-mock>=3.0",
        ],
    },

    test_suite="cronitor_reconcile.test",

    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
    ],
)
