from .interfaces import IAppender, ILoggerWrapper

__all__ = ["IAppender", "ILoggerWrapper"]
