import uvicorn

# Set up logging first
from ogcard.config.logging_config import setup_logging
setup_logging()

from ogcard.core.config import settings
from ogcard.main import app


if __name__ == "__main__":
    uvicorn.run(
        "ogcard.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload,
        reload_dirs=["."]
    )
