import uvicorn

from todo_app.core.config import settings


def main() -> None:
    uvicorn.run("todo_app.main:app", host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    main()
