#!/usr/bin/env python3
"""
RC5 Bench - Python Core Utility Functions
Provides dataset helpers for benchmarking.
"""

import os
import gc
import random
import logging

import psutil

# Setup logging
logger = logging.getLogger("PythonCore")

SIZE_UNITS = {"B": 1, "KB": 1024, "MB": 1024 * 1024, "GB": 1024 * 1024 * 1024}


def parse_size(size_text):
    """
    Parse a human readable size such as "64KB" or "1MB" into bytes.

    Plain integers are taken as a byte count.
    """
    if isinstance(size_text, int):
        return size_text

    text = str(size_text).strip().upper()
    # check two-letter units before the bare "B"
    for unit in ("KB", "MB", "GB", "B"):
        if text.endswith(unit):
            number = text[:-len(unit)].strip()
            try:
                return int(number) * SIZE_UNITS[unit]
            except ValueError:
                raise ValueError(f"Invalid size: {size_text}") from None

    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid size: {size_text}") from None


def generate_dataset(size_bytes, seed=None):
    """Generate a reproducible random dataset of the given size."""
    rng = random.Random(seed)
    logger.info(f"Generating random dataset ({size_bytes} bytes, seed={seed})")
    return rng.randbytes(size_bytes)


def load_dataset(dataset_path):
    """
    Load dataset from file.

    Args:
        dataset_path: Path to the dataset file

    Returns:
        bytes: The dataset content, or None if it cannot be read
    """
    try:
        file_size = os.path.getsize(dataset_path)
        logger.info(f"Loading dataset ({file_size / (1024*1024):.2f} MB) from {dataset_path}")

        # Check available system memory
        available_mem = psutil.virtual_memory().available
        if file_size > available_mem * 0.6:
            logger.warning(
                f"Dataset size ({file_size / (1024*1024):.2f} MB) is large relative to "
                f"available memory ({available_mem / (1024*1024):.2f} MB). "
                f"Consider using a smaller dataset."
            )

        with open(dataset_path, 'rb') as f:
            data = f.read()

        # Force garbage collection after loading large dataset
        gc.collect()

        return data
    except OSError as e:
        logger.error(f"Error loading dataset: {str(e)}")
        return None
