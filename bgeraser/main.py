import uvicorn

from bgeraser.api.app import create_app
from bgeraser.config.settings import Settings
from bgeraser.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build pipeline and app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(
        f"Starting background eraser ({settings.app_env}) with "
        f"removal_strategy={settings.removal_strategy}"
    )
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
