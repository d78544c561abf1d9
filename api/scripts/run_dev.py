"""
Servidor de desarrollo con autoreload sobre app/ y main.py.

Ejecución (desde api/):
  python scripts/run_dev.py
"""
import sys
from pathlib import Path

import uvicorn

_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))

from app.core.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        app_dir=str(_API_ROOT),
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        reload_dirs=[str(_API_ROOT / "app")],
        log_level="debug" if settings.is_development else "info"
    )
