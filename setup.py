from setuptools import setup, find_packages

setup(
    name="siteinsight",
    version="0.1.0",
    packages=find_packages(include=["site_analyzer", "site_analyzer.*", "siteinsight", "siteinsight.*"]),
    include_package_data=True,
    install_requires=[
        "Django>=5.0",
        "djangorestframework>=3.15",
        "django-cors-headers>=4.3",
        "whitenoise>=6.6",
        "python-dotenv>=1.0",
        "requests>=2.31",
        "beautifulsoup4>=4.12",
        "openai>=1.30",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-django>=4.8",
            "httpx>=0.27",
        ],
    },
    author="Wayne",
    author_email="support@techwithwayne.com",
    description="Website analyzer: static SEO/performance/security/accessibility heuristics plus AI content insights, for Django.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://techwithwayne.com",
    license="MIT",
    classifiers=[
        "Framework :: Django",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License"
    ],
    python_requires='>=3.10',
)
