"""命令行启动入口。"""

from __future__ import annotations

import sys
from pathlib import Path

# 确保 src 加入路径
PROJECT_ROOT = Path(__file__).resolve().parent
SRC_DIR = PROJECT_ROOT / "src"
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from toastkit.cli import app


def main() -> None:
    app(prog_name="toastkit")


if __name__ == "__main__":
    main()
