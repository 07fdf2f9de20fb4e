#!/usr/bin/env python3
"""Basic usage example"""

from patternlog import LoggerBuilder, LogLevel, get_logger

def main():
    # Configure a logger with its own console and file outputs
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_pattern("%d{%H:%M:%S}%T[%p]%T[%c]%T%f:%l%T%m%n")
        .with_console()
        .with_file("logs/example.log", level=LogLevel.WARN)
        .build())

    logger.debug("This is debug")
    logger.info("Application started with %d workers", 4)
    logger.warn("This is warning")
    logger.error("This is error")
    logger.fatal("This is fatal")

    # A logger without appenders writes through the root logger
    get_logger("fallback").info("Handled by root")

    # Broken patterns are rejected and the previous default kept
    logger.set_formatter("%Q")

    logger.flush()

if __name__ == "__main__":
    main()
