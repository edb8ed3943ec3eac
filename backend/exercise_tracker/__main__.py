import uvicorn

from exercise_tracker.settings import get_settings


def run() -> None:
    s = get_settings()
    uvicorn.run("exercise_tracker.main:app", host=s.HOST, port=s.PORT, log_level=s.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
