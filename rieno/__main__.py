import uvicorn

from rieno.config import load_settings


def main():
    settings = load_settings()
    # the app is built per server start; importing rieno.main opens nothing
    uvicorn.run("rieno.main:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
