from setuptools import setup

setup(
    name="minikube_utils",
    version="0.1",
    description="Start, stop and query a local minikube cluster",
    url="https://github.com/martius-lab",
    license="MIT",
    packages=["minikube_utils", "minikube_utils.base", "minikube_utils.scripts"],
    python_requires=">=3.9",
    install_requires=[
        "colorama",
        "tqdm",
        (
            "smart_settings @ "
            "git+https://github.com/martius-lab/smart-settings.git"
            "@eb7331fdcad58d314a842087bbf136735e890013"
        ),
    ],
    extras_require={
        # really all optional dependencies
        "all-dev": [
            "minikube_utils[dev]",
            "minikube_utils[mypy]",
        ],
        "lint": [
            "black==24.3.0",
            "ruff==0.1.15",
        ],
        "test": [
            "pytest",
        ],
        "dev": [
            "minikube_utils[lint]",
            "minikube_utils[test]",
            "nox>=2022.8.7",
            "pre-commit",
        ],
        "mypy": [
            "mypy",
            "types-colorama",
            "types-tqdm",
        ],
    },
    entry_points={
        "console_scripts": [
            "minikube_cluster=minikube_utils.scripts.minikube_cluster:main",
        ]
    },
    zip_safe=False,
)
