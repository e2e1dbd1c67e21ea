"""
Mallu Card API Server

Serves the address classification endpoint used by the Mallu Card front end.

Flow:
[ Proof SDK (Swiggy addresses) ] ─> front end ─> POST /api/verify-proof
                                                      ↓
                                          validate publicData.address
                                                      ↓
                                         classify ─> tier + display name
                                                      ↓
                                          card render & share (client)
"""

from dotenv import load_dotenv
import uvicorn

from mallu_api.config.settings import APISettings


def main():
    load_dotenv()
    settings = APISettings()

    uvicorn.run(
        "mallu_api.app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        workers=settings.workers if not settings.debug else 1,
        reload=settings.debug,
        access_log=settings.access_log,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
