# Common utilities
from licverify.common.config import Config as Config
from licverify.common.logging_utils import setup_logger as setup_logger

__all__ = ["Config", "setup_logger"]
