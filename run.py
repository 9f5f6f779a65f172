#!/usr/bin/env python3
"""
adaptive-views - Quick Start Script

Run this script to start the server.
"""
import sys
import os

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    import uvicorn
    from adaptive_views.config import get_settings

    settings = get_settings()

    print("=" * 50)
    print("⇄ Adaptive View Engine")
    print("=" * 50)
    print(f"Server starting at http://{settings.host}:{settings.port}")
    print(f"Views: {settings.views_root}/Views (*{settings.view_extension})")
    print("=" * 50)

    uvicorn.run(
        "adaptive_views.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
