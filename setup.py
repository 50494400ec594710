import setuptools

setuptools.setup(
    name="mtga_match_viewer",
    version="0.1",
    author="yochi",
    author_email="pedrogush@gmail.com",
    description="MTG Arena match viewer: decklists, sideboard decisions and mulligans per match",
    packages=["models", "services", "controllers", "widgets", "widgets.panels", "utils"],
    py_modules=["main"],
    classifiers=["Programming Language :: Python :: 3", "Operating System :: Windows"],
    python_requires=">=3.11",
    install_requires=[
        "wxPython",  # Desktop shell
        "loguru",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "gui_scripts": ["mtga-match-viewer=main:main"],
    },
)
