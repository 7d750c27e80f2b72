from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = (BASE_DIR / "requirements_lib.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# API‑specific and test requirements
# ----------------------------------------------------------------------
requirements_api = (BASE_DIR / "requirements.txt").read_text().splitlines()
requirements_test = (BASE_DIR / "requirements_test.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "api": requirements_api,
    "test": requirements_test + requirements_api,
}

# ----------------------------------------------------------------------
setup(
    name="clipboard-masker",
    version=version,
    description="Clipboard masker – PII masking and link cleaning with optional REST API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=[
            "clipboard_masker_lib*",
            "clipboard_masker_cli*",
            "clipboard_masker_web*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements_lib,
    extras_require=extras,
    entry_points={
        "console_scripts": [
            "clipboard-masker=clipboard_masker_cli.clipboard_masker:main",
            "clipboard-masker-api=clipboard_masker_web.app:main",
        ]
    },
)
