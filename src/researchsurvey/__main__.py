"""Run the API with uvicorn: ``python -m researchsurvey``."""

import uvicorn

from researchsurvey.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "researchsurvey.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development and settings.debug,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
