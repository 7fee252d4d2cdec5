import os
import sys

# Add the src directory to the Python path
project_root = os.path.abspath('.')
src_path = os.path.join(project_root, 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from journal_citations.config import Config
from journal_citations.utils.logging_setup import setup_logging
from journal_citations.web import create_app

setup_logging(log_dir=Config.LOG_DIR, level=Config.LOG_LEVEL)
application = create_app()

if __name__ == "__main__":
    application.run(debug=True)
