"""Utility decorators for logging."""
import functools
import time
from typing import Callable
from src.utils.logging import get_logger

logger = get_logger(__name__)


def log_execution(log_args: bool = True, log_result: bool = False):
    """
    Decorator to log function execution with timing.
    
    Args:
        log_args: Whether to log function arguments
        log_result: Whether to log function result
    
    Example:
        @log_execution(log_args=False, log_result=True)
        def convert(self, amount, from_code, to_code):
            ...
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            func_name = func.__name__
            
            extra = {"function": func_name}
            if log_args:
                extra["function_args"] = str(args)[:100]  # Truncate long args
                extra["function_kwargs"] = str(kwargs)[:100]
            
            logger.info(f"Starting {func_name}", extra=extra)
            
            try:
                result = func(*args, **kwargs)
                execution_time = (time.time() - start_time) * 1000  # ms
                
                log_extra = {"function": func_name, "execution_time_ms": round(execution_time, 2)}
                if log_result:
                    log_extra["result"] = str(result)[:100]
                
                logger.info(f"Completed {func_name}", extra=log_extra)
                return result
            except Exception as e:
                execution_time = (time.time() - start_time) * 1000
                logger.error(
                    f"Failed {func_name}",
                    extra={
                        "function": func_name,
                        "execution_time_ms": round(execution_time, 2),
                        "error": str(e),
                        "error_kind": type(e).__name__,
                    }
                )
                raise
        
        return wrapper
    
    return decorator
