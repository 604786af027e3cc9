import sys
import os
import logging

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import configure_logging
from services import dashboard

if __name__ == '__main__':
    configure_logging()
    added = dashboard.load_sample_data(include_rituals='--no-rituals' not in sys.argv)
    logging.getLogger(__name__).info("Seeded %s", added)
