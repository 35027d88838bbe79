import logging

# configure logging
logger = logging.getLogger("PythonCore")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# import components
from .metrics import BenchmarkMetrics
from .utils import generate_dataset, load_dataset, parse_size
from .results import calculate_aggregated_metrics, save_results
from .registry import get_implementation, register_implementation, list_implementations, register_all_implementations
from .benchmark_runner import get_enabled_methods, run_benchmarks

__all__ = [
    'BenchmarkMetrics',
    'generate_dataset',
    'load_dataset',
    'parse_size',
    'calculate_aggregated_metrics',
    'save_results',
    'get_implementation',
    'register_implementation',
    'list_implementations',
    'register_all_implementations',
    'get_enabled_methods',
    'run_benchmarks',
]
