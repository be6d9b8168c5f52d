"""setuptools 打包配置。"""

from __future__ import annotations

from setuptools import find_packages, setup


VERSION = "0.1.0"

INSTALL_REQUIRES = [
    "pydantic>=2.0",
    "jinja2>=3.0",
    "fastapi>=0.100",
    "uvicorn>=0.20",
    "typer>=0.9",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=7.0",
        "httpx>=0.24",
    ],
}


setup(
    name="toastkit",
    version=VERSION,
    description="Render and show Windows toast notifications through PowerShell.",
    python_requires=">=3.9",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        "console_scripts": [
            "toastkit=toastkit.cli:app",
        ],
    },
)
