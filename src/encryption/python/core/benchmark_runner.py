import gc
import logging
import traceback
from datetime import datetime

from .metrics import BenchmarkMetrics
from .results import calculate_aggregated_metrics, save_results
from .utils import generate_dataset, load_dataset, parse_size

logger = logging.getLogger("PythonCore")

def get_key_size_bytes(key, implementation):
    # RC5 keys are raw byte strings
    if hasattr(key, '__len__'):
        return len(key)

    key_size = getattr(implementation, 'key_size', None)
    if key_size:
        return key_size // 8

    logger.warning(f"Could not determine key size for implementation: {getattr(implementation, 'name', '')}")
    return 16

def get_enabled_methods(config, implementations):
    # expand each enabled method into (implementation name, settings) pairs
    enabled_methods = []
    for method_name, settings in config["encryption_methods"].items():
        if not settings.get("enabled", False):
            continue

        if method_name != "rc5":
            enabled_methods.append((method_name, settings.copy()))
            continue

        word_sizes = settings.get("word_sizes", [settings.get("word_size", 32)])
        modes = settings.get("modes", [settings.get("mode", "CBC")])

        for word_size in word_sizes:
            for mode in modes:
                impl_name = f"rc5_{int(word_size)}_{str(mode).lower()}"
                if impl_name not in implementations:
                    logger.warning(f"Unsupported RC5 variant '{impl_name}'. Skipping.")
                    continue

                variant_settings = {
                    "word_size": int(word_size),
                    "mode": str(mode).upper(),
                    "rounds": settings.get("rounds", 12),
                    "key_size": int(settings.get("key_size", 128)),
                    "is_custom": True,
                }
                enabled_methods.append((impl_name, variant_settings))

    return enabled_methods

def run_benchmarks(config, implementations):
    # get session information
    session_dir = config["session_info"]["session_dir"]
    session_id = config["session_info"].get("session_id", "")

    logger.info(f"Starting Python benchmarks for session {session_id}")

    # extract test parameters
    test_parameters = config["test_parameters"]
    iterations = int(test_parameters["iterations"])
    dataset_path = test_parameters.get("dataset_path")

    # load the dataset, or generate a seeded random one
    if dataset_path:
        dataset = load_dataset(dataset_path)
        if dataset is None:
            logger.error("Failed to load dataset. Aborting.")
            return False
    else:
        dataset = generate_dataset(
            parse_size(test_parameters.get("dataset_size", "64KB")),
            test_parameters.get("seed"),
        )

    dataset_size = len(dataset)
    logger.info(f"Dataset ready: {dataset_size / (1024*1024):.2f} MB")

    # get enabled encryptions
    enabled_methods = get_enabled_methods(config, implementations)

    if not enabled_methods:
        logger.error("No encryption methods enabled in configuration. Aborting.")
        return False

    logger.info(f"Available implementations: {list(implementations.keys())}")
    logger.info(f"Enabled methods for benchmarking: {[method for method, _ in enabled_methods]}")

    # initialize results dictionary
    results = {
        "timestamp": datetime.now().isoformat(),
        "session_id": session_id,
        "language": "python",
        "dataset": {
            "path": dataset_path,
            "size_bytes": dataset_size
        },
        "test_configuration": {
            "iterations": iterations,
            "seed": test_parameters.get("seed")
        },
        "encryption_results": {}
    }

    # run benchmarks for each enabled encryption method
    for method_name, settings in enabled_methods:
        if method_name not in implementations:
            logger.warning(f"No implementation found for {method_name}. Skipping.")
            continue

        try:
            implementation = implementations[method_name](**settings)
        except (TypeError, ValueError) as e:
            logger.error(f"Could not create {method_name}: {str(e)}")
            continue

        impl_description = getattr(implementation, 'description', method_name)
        logger.info(f"Running benchmark for {impl_description}")

        # run iterations
        iteration_results = []
        for i in range(iterations):
            logger.info(f"Running iteration {i+1}/{iterations} for {impl_description}")

            # create metrics collector
            metrics = BenchmarkMetrics()

            try:
                # generate a new key for each iteration
                key = metrics.measure_keygen(implementation.generate_key)
                metrics.set_algorithm_metadata(implementation, get_key_size_bytes(key, implementation))

                ciphertext = metrics.measure_encrypt(implementation.encrypt, dataset, key)
                metrics.measure_decrypt(implementation.decrypt, ciphertext, key, dataset)

                if metrics.correctness_passed:
                    logger.info(f"Correctness check passed for {impl_description}")
                else:
                    logger.error(f"Correctness check failed for {impl_description}")

                iteration_results.append(metrics.to_dict(i + 1))
                logger.info(f"Iteration {i+1} completed successfully")

                # clean up
                del ciphertext

            except (TypeError, ValueError) as e:
                logger.error(f"Error in iteration {i+1}: {str(e)}")
                logger.debug(traceback.format_exc())

            # force GC between iterations
            gc.collect()

        # add to results
        results["encryption_results"][method_name] = {
            "iterations": iteration_results,
            "aggregated_metrics": calculate_aggregated_metrics(iteration_results, dataset_size),
            "configuration": settings,
            "implementation_type": "custom",
            "description": impl_description
        }

        logger.info(f"Benchmark completed for {impl_description}")

    # save results
    results_path = save_results(results, session_dir)
    gc.collect()

    return results_path if results_path else False
