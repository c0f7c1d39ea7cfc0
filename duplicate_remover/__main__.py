"""Entry point: python -m duplicate_remover"""

import uvicorn
from .config import settings


def main():
    uvicorn.run(
        "duplicate_remover.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
