"""
Logging facade used across homebruh.
"""

import inspect
import logging

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the homebruh log
    """

    caller_file: str
    caller_name: str
    caller_line: int
    level: str
    message: str


class BruhLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "homebruh") -> None:
        self.logger = logging.getLogger(name)

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the message as a structured LogLine, recording where it was logged from
        """
        debug_message = debug_message.replace("\n", " ")

        calframe = inspect.getouterframes(inspect.currentframe(), 2)
        caller_file = calframe[1][1].split("/")[-1]
        caller_line = calframe[1][2]
        caller_name = calframe[1][3]

        log_line = LogLine(
            caller_file=caller_file,
            caller_name=caller_name,
            caller_line=caller_line,
            level=logging.getLevelName(level),
            message=debug_message,
        )
        self.logger.log(level=level, msg=log_line.model_dump_json())
