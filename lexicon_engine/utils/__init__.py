from .logger_utils import Log
from .config_manager import Config
from .metrics_tracker import Metrics
from .timing import timed

__all__ = ["Log", "Config", "Metrics", "timed"]
