import os

__version__ = "1.0.0"


def data_dir() -> str:
    """Return the directory holding config.json and the debug minify.log.

    Uses %APPDATA%/webminify on Windows, ~/.webminify on Unix. Nothing is
    created here unless WEBMINIFY_DEBUG turns on file logging.
    """
    if os.name == "nt":
        appdata = os.environ.get(
            "APPDATA", os.path.join(os.path.expanduser("~"), "AppData", "Roaming")
        )
        return os.path.join(appdata, "webminify")
    return os.path.join(os.path.expanduser("~"), ".webminify")
