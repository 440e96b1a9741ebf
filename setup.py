from setuptools import setup, find_packages

setup(
    name="ya-md5",
    version="0.1.0",
    description="Streaming MD5 (RFC 1321) message digest in pure Python, with hashlib-style hashers, one-shot helpers, columnar helpers and an md5sum-like command line.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ya-md5=ya_md5.cli:main",
        ],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
