# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="uview",
    version="1.0.0",
    description="Desktop viewer and command-line inspector for .unitypackage archives",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["uview*"]),
    python_requires=">=3.8",
    install_requires=[
        "customtkinter",  # GUI toolkit (main window, frames, dialogs)
        "tkinterdnd2",  # Drag & drop of package files onto the window
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'uview=uview.main:main',  # CLI with arguments, GUI without
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
