import sys
import gc
import copy
import argparse
import json
import logging
from pathlib import Path

# add the project root to the Python path
script_dir = Path(__file__).parent.absolute()
project_root = script_dir.parent.parent.parent  # go up from src/encryption/python/ to project root
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# setup logging
logger = logging.getLogger("PythonCore")
logger.setLevel(logging.INFO)

if not logger.handlers:
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    ch.setFormatter(formatter)
    logger.addHandler(ch)

# import core functionality
from src.encryption.python.core.registry import register_all_implementations
from src.encryption.python.core.benchmark_runner import run_benchmarks

DEFAULT_CONFIG = {
    "session_info": {
        "session_dir": "./session",
        "session_id": "session"
    },
    "test_parameters": {
        "iterations": 3,
        "dataset_path": None,
        "dataset_size": "64KB",
        "seed": None
    },
    "encryption_methods": {
        "rc5": {
            "enabled": True,
            "word_sizes": [32],
            "modes": ["ECB", "CBC", "CTR"],
            "rounds": 12,
            "key_size": 128
        }
    }
}

def merge_config(defaults, overrides):
    # recursively merge overrides into a copy of defaults
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged

def load_config(config_file):
    # load a JSON configuration and merge it over the defaults
    with open(config_file, 'r') as f:
        config = json.load(f)

    if not isinstance(config, dict):
        raise ValueError("Configuration must be a JSON object")

    return merge_config(DEFAULT_CONFIG, config)

def main(argv=None, config=None):
    # main entry point
    if not config:
        parser = argparse.ArgumentParser(description="RC5 Encryption Benchmarking")
        parser.add_argument("config_file", help="Path to the test configuration JSON file")
        args = parser.parse_args(argv)

        # load configuration
        try:
            config = load_config(args.config_file)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {str(e)}")
            return 1
    else:
        config = merge_config(DEFAULT_CONFIG, config)

    # store original garbage collection state
    gc_was_enabled = gc.isenabled()

    try:
        # register all implementations
        implementations = register_all_implementations()

        # run benchmarks
        result = run_benchmarks(config, implementations)
        return 0 if result else 1
    finally:
        # restore original garbage collection state
        if gc_was_enabled:
            gc.enable()
        else:
            gc.disable()

        # run twice to catch circular references
        gc.collect()
        gc.collect()

if __name__ == "__main__":
    sys.exit(main())
