"""Run the API with uvicorn: `python -m hrms`."""

import uvicorn

from hrms.config import settings


def main() -> None:
    uvicorn.run(
        "hrms.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
