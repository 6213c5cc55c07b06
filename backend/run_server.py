"""
Development server runner with auto-reload
"""
import uvicorn

from stylematch.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    print(f"[SERVER] Starting StyleMatch API on port {settings.port}...")
    uvicorn.run(
        "stylematch.main:app",
        host="127.0.0.1",
        port=settings.port,
        reload=True
    )
