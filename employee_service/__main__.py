"""Run the service with uvicorn: python -m employee_service"""

import uvicorn

from employee_service.config import settings


def main() -> None:
    uvicorn.run(
        "employee_service.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
