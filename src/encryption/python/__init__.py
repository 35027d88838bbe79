# import core modules
from src.encryption.python.core.registry import register_all_implementations, list_implementations, get_implementation

# import RC5 implementations
from src.encryption.python.rc5 import RC5Implementation, get_rc5_implementation, register_rc5_implementations

__all__ = [
    'register_all_implementations',
    'list_implementations',
    'get_implementation',
    'RC5Implementation',
    'get_rc5_implementation',
    'register_rc5_implementations'
]
