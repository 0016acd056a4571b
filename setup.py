from setuptools import setup, find_packages

setup(
    name="mtg_card_stats",
    version="0.1.0",
    description="Gradio dashboard of Magic: The Gathering card counts by color and supertype",
    packages=find_packages(
        include=["mtg_card_stats", "mtg_card_stats.*", "mtg_card_stats_ui", "mtg_card_stats_ui.*"]
    ),
    install_requires=[
        "pydantic>=2",
        "pandas",
        "gradio",
        "matplotlib",
        "lxml",
        "requests",
        "fastapi",
        "uvicorn",
    ],
    extras_require={
        "dev": [
            "pytest",
        ],
    },
    python_requires=">=3.10",
    include_package_data=True,
    package_data={
        "mtg_card_stats_ui": ["config/*.ini", "static/*"],
    },
    entry_points={
        "console_scripts": [
            "mtg-card-stats=mtg_card_stats_ui.app:main",
        ]
    },
)
