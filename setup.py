from setuptools import setup, find_packages

setup(
    name="voyage_scan",
    version="0.1.0",
    description="Voyage summary screenshot analysis: antimatter and skill extraction",
    author="Will",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "opencv-python>=4.8.0",
        "numpy>=1.24.0",
        "Pillow>=9.5.0",
        "pytesseract>=0.3.10",
        "requests>=2.31.0",
    ],
    extras_require={
        "paddle": [
            "paddlepaddle>=2.5.0",
            "paddleocr>=2.7.0,<3.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
)
