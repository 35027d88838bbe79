import time
import logging
import psutil

# setup logging
logger = logging.getLogger("PythonCore")

PHASES = ("keygen", "encrypt", "decrypt")

class BenchmarkMetrics:
    def __init__(self, process=None):
        # initialize with optional psutil process object
        self.process = process or psutil.Process()

        # check if context switches are available
        try:
            self.has_ctx_switches = self.process.num_ctx_switches() is not None
        except (psutil.AccessDenied, AttributeError, OSError):
            self.has_ctx_switches = False
            logger.warning("Context switch counters are not available - context switch metrics will not be collected")

        self.reset()

    def reset(self):
        # reset all metrics
        for phase in PHASES:
            setattr(self, f"{phase}_time_ns", 0)
            setattr(self, f"{phase}_cpu_time_ns", 0)
            setattr(self, f"{phase}_cpu_percent", 100)
            setattr(self, f"{phase}_peak_memory_bytes", 0)
            setattr(self, f"{phase}_allocated_memory_bytes", 0)
            setattr(self, f"{phase}_ctx_switches_voluntary", 0)
            setattr(self, f"{phase}_ctx_switches_involuntary", 0)

        self.input_size_bytes = 0
        self.ciphertext_size_bytes = 0
        self.decrypted_size_bytes = 0

        # additional metrics
        self.correctness_passed = True
        self.key_size_bytes = 0
        self.key_size_bits = 0
        self.thread_count = 1
        self.process_priority = 0

        # algorithm-specific metrics
        self.word_size_bits = None
        self.block_size_bytes = None
        self.iv_size_bytes = None
        self.num_rounds = None
        self.mode = None
        self.version = None
        self.is_custom_implementation = True

    def set_algorithm_metadata(self, implementation, key_size_bytes):
        # set algorithm-specific metadata based on the implementation
        self.key_size_bytes = key_size_bytes
        self.key_size_bits = key_size_bytes * 8
        self.is_custom_implementation = getattr(implementation, 'is_custom', True)

        self.word_size_bits = getattr(implementation, 'word_size', None)
        self.block_size_bytes = getattr(implementation, 'block_size', None)
        self.num_rounds = getattr(implementation, 'rounds', None)
        self.mode = getattr(implementation, 'mode', None)

        # CBC carries an IV block, CTR a nonce/counter block, ECB nothing
        if self.mode in ("CBC", "CTR"):
            self.iv_size_bytes = self.block_size_bytes
        else:
            self.iv_size_bytes = 0

        if self.word_size_bits is not None and self.num_rounds is not None:
            self.version = f"RC5-v1/{self.word_size_bits}/{self.num_rounds}/{key_size_bytes}"

        # get thread count and process priority
        try:
            self.thread_count = self.process.num_threads()
        except (psutil.AccessDenied, AttributeError, OSError):
            self.thread_count = 1

        try:
            # get process priority (nice value on Unix systems)
            self.process_priority = self.process.nice()
        except (psutil.AccessDenied, AttributeError, OSError):
            self.process_priority = 0

    def _snapshot(self):
        # take a snapshot of cpu times, memory and context switches
        try:
            cpu_times = self.process.cpu_times()
        except (psutil.AccessDenied, AttributeError, OSError):
            cpu_times = None

        try:
            memory = self.process.memory_info()
        except (psutil.AccessDenied, AttributeError, OSError):
            memory = None

        try:
            ctx = self.process.num_ctx_switches() if self.has_ctx_switches else None
        except (psutil.AccessDenied, AttributeError, OSError):
            ctx = None
            self.has_ctx_switches = False

        return cpu_times, memory, ctx

    def _measure(self, phase, func, *args, **kwargs):
        initial_cpu_times, initial_memory, initial_ctx = self._snapshot()

        # measure wall time with nanosecond precision
        start_time = time.perf_counter_ns()
        result = func(*args, **kwargs)
        end_time = time.perf_counter_ns()

        final_cpu_times, final_memory, final_ctx = self._snapshot()

        wall_time_ns = end_time - start_time
        setattr(self, f"{phase}_time_ns", wall_time_ns)

        # update CPU time metrics if available
        if initial_cpu_times is not None and final_cpu_times is not None:
            cpu_user_diff = final_cpu_times.user - initial_cpu_times.user
            cpu_system_diff = final_cpu_times.system - initial_cpu_times.system
            total_cpu_time = cpu_user_diff + cpu_system_diff

            # convert to nanoseconds
            setattr(self, f"{phase}_cpu_time_ns", int(total_cpu_time * 1_000_000_000))

            # calculate CPU percentage
            wall_time_s = wall_time_ns / 1_000_000_000
            if wall_time_s > 0:
                setattr(self, f"{phase}_cpu_percent", (total_cpu_time / wall_time_s) * 100)
        else:
            logger.warning("CPU time metrics are not available - CPU metrics will not be collected")

        # update context switch metrics if available
        if initial_ctx is not None and final_ctx is not None:
            setattr(self, f"{phase}_ctx_switches_voluntary", max(0, final_ctx.voluntary - initial_ctx.voluntary))
            setattr(self, f"{phase}_ctx_switches_involuntary", max(0, final_ctx.involuntary - initial_ctx.involuntary))

        # record peak memory usage
        if final_memory is not None:
            setattr(self, f"{phase}_peak_memory_bytes", final_memory.rss)
            if initial_memory is not None:
                setattr(self, f"{phase}_allocated_memory_bytes", max(0, final_memory.rss - initial_memory.rss))

        return result

    def measure_keygen(self, key_gen_func, *args, **kwargs):
        return self._measure("keygen", key_gen_func, *args, **kwargs)

    def measure_encrypt(self, encrypt_func, plaintext, key, *args, **kwargs):
        # store input size
        self.input_size_bytes = len(plaintext)

        ciphertext = self._measure("encrypt", encrypt_func, plaintext, key, *args, **kwargs)
        self.ciphertext_size_bytes = len(ciphertext)
        return ciphertext

    def measure_decrypt(self, decrypt_func, ciphertext, key, original_plaintext, *args, **kwargs):
        decrypted_text = self._measure("decrypt", decrypt_func, ciphertext, key, *args, **kwargs)
        self.decrypted_size_bytes = len(decrypted_text)

        # verify correctness
        self.correctness_passed = (decrypted_text == original_plaintext)
        if not self.correctness_passed:
            logger.error("Decrypted data does not match the original plaintext")

        return decrypted_text

    def to_dict(self, iteration_number=1):
        result = {"iteration": iteration_number}

        for phase in PHASES:
            for metric in ("time_ns", "cpu_time_ns", "cpu_percent", "peak_memory_bytes",
                           "allocated_memory_bytes", "ctx_switches_voluntary",
                           "ctx_switches_involuntary"):
                name = f"{phase}_{metric}"
                result[name] = getattr(self, name)

        result.update({
            "key_size_bytes": self.key_size_bytes,
            "key_size_bits": self.key_size_bits,
            "thread_count": self.thread_count,
            "process_priority": self.process_priority,
            "input_size_bytes": self.input_size_bytes,
            "ciphertext_size_bytes": self.ciphertext_size_bytes,
            "decrypted_size_bytes": self.decrypted_size_bytes,
            "correctness_passed": self.correctness_passed,
            "is_custom_implementation": self.is_custom_implementation,
        })

        # add algorithm-specific fields if available
        for name in ("word_size_bits", "block_size_bytes", "iv_size_bytes", "num_rounds", "mode", "version"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value

        return result
