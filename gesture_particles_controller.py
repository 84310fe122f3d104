import pygame

from config import DEBUG, LOG_TO_FILE
from logger import setup_logging
from particles.viewer import run_viewer


def main():
    setup_logging(debug=DEBUG, log_to_file=LOG_TO_FILE)
    try:
        run_viewer()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
