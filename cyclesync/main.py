import uvicorn
from cyclesync.api.api_run import app
from cyclesync.utilities.config import APP_HOST, APP_PORT


if __name__ == "__main__":
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
