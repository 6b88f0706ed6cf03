#!/usr/bin/env python3
"""
Staff API - development server runner.
Puts backend/ on the import path and starts uvicorn with reload.
"""

import os
import sys

project_root = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.join(project_root, "backend")

if backend_path not in sys.path:
    sys.path.insert(0, backend_path)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "staff_api.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
        reload_dirs=[backend_path],
        app_dir=backend_path,
        log_level="info",
    )
