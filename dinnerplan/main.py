import uvicorn
from dinnerplan.api.api_run import app
from dinnerplan.utilities.config import APP_HOST, APP_PORT


def main():
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    main()
