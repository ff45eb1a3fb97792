import logging

from utils.logging_config import setup_logging, silence_sql_loggers

# Initialize centralized logging configuration
setup_logging()
silence_sql_loggers()

from app import main

if __name__ == '__main__':
    logging.info("🚀 Starting store API")
    main()
