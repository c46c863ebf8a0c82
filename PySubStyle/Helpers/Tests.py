import logging
import os
import sys
from collections.abc import Callable
from functools import wraps
from typing import Any

separator = "".center(60, "-")

def log_test_name(test_name : str) -> None:
    logging.info(separator)
    logging.info(test_name)
    logging.info(separator)

def log_input_expected_result(input : Any, expected : Any, result : Any) -> None:
    """
    Log the input, the expected result and the actual result of a test step
    """
    logging.info(f"{str(input):<40} | expected: {str(expected):<25} | result: {str(result)}")

def log_input_expected_error(input : Any, expected_error : type[Exception], error : BaseException) -> None:
    """
    Log an exception raised by a test step along with the type of exception that was expected
    """
    logging.info(f"{str(input):<40} | expected: {expected_error.__name__:<25} | raised: {type(error).__name__}: {error}")

def is_debugger_attached() -> bool:
    return sys.gettrace() is not None

def skip_if_debugger_attached(function : Callable) -> Callable:
    """
    Skip a test that provokes errors when running under a debugger, which would break on them
    """
    @wraps(function)
    def wrapper(*args, **kwargs):
        if is_debugger_attached():
            logging.info(f"Skipping {function.__name__} because a debugger is attached")
            return None
        return function(*args, **kwargs)
    return wrapper

def create_logfile(results_path : str, log_name : str, log_level : int = logging.DEBUG) -> logging.FileHandler:
    """
    Add a file handler to the root logger that writes to the results directory
    """
    os.makedirs(results_path, exist_ok=True)
    log_path = os.path.join(results_path, log_name)
    file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logging.getLogger('').addHandler(file_handler)
    return file_handler

def end_logfile(file_handler : logging.FileHandler) -> None:
    """
    Detach and close a file handler created by create_logfile
    """
    logging.getLogger('').removeHandler(file_handler)
    file_handler.close()
