# server/__main__.py

import uvicorn
from server.config import load_settings


def main():
    settings = load_settings()
    uvicorn.run("server.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
