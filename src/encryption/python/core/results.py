import os
import json
import logging

# setup logging
logger = logging.getLogger("PythonCore")

NS_PER_S = 1_000_000_000
BYTES_PER_MB = 1024 * 1024

def safe_avg(values):
    # compute average safely handling empty lists and None values
    values = [v for v in values if v is not None]
    return sum(values) / len(values) if values else 0

def calculate_aggregated_metrics(iterations_data, dataset_size_bytes):
    # calculate aggregated metrics from iteration data
    if not iterations_data:
        return {}

    def column(name, default=0):
        return [data.get(name, default) for data in iterations_data]

    result = {
        "iterations_completed": len(iterations_data),
        # every iteration must pass
        "all_correctness_checks_passed": all(column("correctness_passed", True)),
        "correctness_failures": len([ok for ok in column("correctness_passed", True) if not ok]),
    }

    for phase in ("keygen", "encrypt", "decrypt"):
        times_ns = column(f"{phase}_time_ns")
        avg_time_ns = safe_avg(times_ns)
        avg_memory = safe_avg([m for m in column(f"{phase}_peak_memory_bytes") if m > 0])

        result[f"avg_{phase}_time_ns"] = avg_time_ns
        result[f"avg_{phase}_time_s"] = avg_time_ns / NS_PER_S
        result[f"avg_{phase}_cpu_time_ns"] = safe_avg(column(f"{phase}_cpu_time_ns"))
        result[f"avg_{phase}_cpu_percent"] = safe_avg(column(f"{phase}_cpu_percent", 100))
        result[f"avg_{phase}_peak_memory_bytes"] = avg_memory
        result[f"avg_{phase}_peak_memory_mb"] = avg_memory / BYTES_PER_MB
        result[f"total_{phase}_time_ns"] = sum(times_ns)

    # throughput (avoid division by zero)
    for phase in ("encrypt", "decrypt"):
        avg_time_s = result[f"avg_{phase}_time_s"]
        if avg_time_s > 0:
            result[f"avg_{phase}_throughput_bps"] = dataset_size_bytes / avg_time_s
            result[f"avg_throughput_{phase}_mb_per_s"] = (dataset_size_bytes / BYTES_PER_MB) / avg_time_s
        else:
            result[f"avg_{phase}_throughput_bps"] = 0
            result[f"avg_throughput_{phase}_mb_per_s"] = 0

    key_sizes = [k for k in column("key_size_bytes") if k > 0]
    avg_ciphertext_size_bytes = safe_avg(column("ciphertext_size_bytes"))

    # ciphertext overhead covers padding plus the IV / counter block header
    avg_ciphertext_overhead_percent = 0
    if dataset_size_bytes > 0 and avg_ciphertext_size_bytes > 0:
        avg_ciphertext_overhead_percent = (
            (avg_ciphertext_size_bytes - dataset_size_bytes) / dataset_size_bytes
        ) * 100

    result.update({
        "avg_key_size_bytes": safe_avg(key_sizes),
        "avg_ciphertext_size_bytes": avg_ciphertext_size_bytes,
        "avg_ciphertext_overhead_percent": avg_ciphertext_overhead_percent,
        "total_num_keys": len(key_sizes),
        "total_key_size_bytes": sum(key_sizes),
    })

    # operational metrics are constant across iterations
    first_iter = iterations_data[0]
    result["thread_count"] = first_iter.get("thread_count", 1)
    result["process_priority"] = first_iter.get("process_priority", 0)
    result["is_custom_implementation"] = first_iter.get("is_custom_implementation", True)

    for name in ("word_size_bits", "block_size_bytes", "iv_size_bytes", "num_rounds", "mode", "version"):
        if first_iter.get(name) is not None:
            result[name] = first_iter[name]

    return result

def save_results(results, session_dir):
    # save benchmark results to a JSON file
    try:
        # ensure the results directory exists
        results_dir = os.path.join(session_dir, "results")
        os.makedirs(results_dir, exist_ok=True)

        results_path = os.path.join(results_dir, "python_results.json")
        with open(results_path, 'w') as f:
            json.dump(results, f, indent=4)

        logger.info(f"Results saved to {results_path}")
        return results_path

    except OSError as e:
        logger.error(f"Failed to save results: {str(e)}")
        return None
