from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="curvekeys",
        version="0.1.0",
        description="Curve-agnostic private keys: secp256k1 and STARK signing",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        extras_require={"test": ["pytest"]},
    )
