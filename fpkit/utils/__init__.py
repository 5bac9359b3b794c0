from .logging_factory import LoggingFactory, get_logger, setup_library_logging

__all__ = ["LoggingFactory", "get_logger", "setup_library_logging"]
