from dotenv import load_dotenv

from . import settings
from .app import create_app
from .logging_utils import configure


def main():
    # .env fills gaps only; real environment variables win
    load_dotenv(override=False)
    log = configure(settings.log_level(), settings.log_dir())
    app = create_app()
    port = settings.port()
    log.info("Server is running on port %d", port)
    app.run(host="0.0.0.0", port=port, threaded=True)

if __name__ == "__main__":
    main()
