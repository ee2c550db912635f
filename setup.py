from setuptools import setup, find_packages

setup(
    name="office-template-pdf",
    version="1.0.0",
    description="Fill Office document templates with JSON data and render them to PDF",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "apryse-sdk>=10.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "office-template-pdf=office_template_pdf.cli:main",
        ],
    },
)
