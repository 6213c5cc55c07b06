"""
Run the API with uvicorn: python -m stylematch
"""
import uvicorn

from stylematch.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("stylematch.main:app", host=settings.host, port=settings.port)
