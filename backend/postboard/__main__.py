# backend/postboard/__main__.py

"""
`python -m postboard` で uvicorn サーバを起動する。
"""

import uvicorn

from postboard.config import get_app_settings


def main() -> None:
    settings = get_app_settings()
    uvicorn.run(
        "postboard.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
