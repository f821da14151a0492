#!/usr/bin/env python3
"""Basic usage example"""

from plugin_logger import FileLogger, LogLevel, LogTimeOption

def main():
    # File backend writing to logs/example.log, echoed to the console
    logger = FileLogger("logs")
    logger.configure(
        time_option=LogTimeOption.UTC_TIME,
        log_file_name="example.log",
        max_log_files_count=3,
        max_log_file_size_kb=100,
        level=LogLevel.DEBUG,
        log_to_console=True,
    )

    # Log messages
    logger.debug("example", "This is debug")
    logger.info("example", "Application started")
    logger.warn("example", "This is warning")
    try:
        1 / 0
    except ZeroDivisionError as e:
        logger.error("example", "This is error", e)
    logger.fatal("example", "This is fatal")

    # Read back, newest first
    print(logger.get_all())

    logger.purge()
    logger.close()

if __name__ == "__main__":
    main()
