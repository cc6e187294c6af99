"""
Tasrif Web - FastAPI Backend

Serves the three conjugation tabs as HTML and the same tables as JSON.

Usage:
    uvicorn tasrif.web.main:app --reload --port 8000

API Documentation:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, get_settings
from .api.routes import pages, router

logger = logging.getLogger(__name__)

DESCRIPTION = """
## Tasrif (تصريف) - Arabic Verb Conjugation Tables

An educational tool showing how a three-letter root is conjugated
across the 14 persons.

### Phases
- **Phase 1**: past tense (الماضي) of a typed root
- **Phase 2**: present tense (المضارع) of a typed root
- **Phase 3**: irregular verbs - hollow, weak-final, weak-initial, doubled

### Quick Start
```python
import requests

response = requests.post(
    "http://localhost:8000/api/conjugate/past",
    json={"root": ["ك", "ت", "ب"]}
)
print(response.json()["conjugations"][0])
# Output: {'pronoun': 'هو', 'verb': 'كَتَبَ'}
```
"""


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Tasrif - Arabic Verb Conjugation API",
        description=DESCRIPTION,
        version=__version__,
        license_info={
            "name": "MIT",
        }
    )

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(router, prefix="/api", tags=["conjugation"])
    app.include_router(pages, tags=["pages"])

    logger.info("Tasrif %s app created (CORS origins: %s)", __version__, ", ".join(settings.cors_origins))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    _settings = get_settings()
    uvicorn.run(app, host=_settings.host, port=_settings.port)
