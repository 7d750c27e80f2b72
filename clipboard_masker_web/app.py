from clipboard_masker_lib.constants import (
    LOG_FILE_NAME,
    LOG_LEVEL,
    SERVER_DEBUG,
    SERVER_HOST,
    SERVER_PORT,
)
from clipboard_masker_lib.utils.logger import prepare_logger
from clipboard_masker_web.web import create_app

prepare_logger("clipboard_masker_lib", level=LOG_LEVEL, log_file_name=LOG_FILE_NAME)

app = create_app()


def main() -> None:
    app.run(host=SERVER_HOST, port=SERVER_PORT, debug=SERVER_DEBUG)


if __name__ == "__main__":
    main()
