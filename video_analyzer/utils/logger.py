import os
import sys
import logging

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(os.path.dirname("/".join(os.path.abspath(__file__).split('/')[:-2])), "logs")
logging_path = os.path.join(logging_dir, "videoanalyzer.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('videoanalyzer')


def set_log_level(level: str):
    """Apply the configured level to the application logger."""
    logging.setLevel(level.upper())
