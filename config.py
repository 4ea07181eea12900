"""Default settings for the interactive calculator."""

REPL_CONFIG = {
    "prompt": "calc> ",
    "log_level": "WARNING",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
