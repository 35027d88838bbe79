import logging

# setup logging
logger = logging.getLogger("PythonCore")

# dictionary to store implementations
ENCRYPTION_IMPLEMENTATIONS = {}

def register_implementation(name):
    # register an encryption implementation
    def decorator(impl_class):
        ENCRYPTION_IMPLEMENTATIONS[name] = impl_class
        return impl_class
    return decorator

def get_implementation(name):
    # get an implementation by name
    return ENCRYPTION_IMPLEMENTATIONS.get(name)

def list_implementations():
    # list all registered implementations
    return list(ENCRYPTION_IMPLEMENTATIONS.keys())

def register_all_implementations():
    # import here to avoid circular imports
    from src.encryption.python.rc5 import register_rc5_implementations

    # get all RC5 variants (word size x mode)
    rc5_implementations = register_rc5_implementations()

    for name, impl in rc5_implementations.items():
        ENCRYPTION_IMPLEMENTATIONS[name] = impl

    logger.info(f"Registered RC5 implementations: {', '.join(rc5_implementations.keys())}")

    # log all registered implementations
    logger.info(f"Total registered implementations: {len(ENCRYPTION_IMPLEMENTATIONS)}")
    return ENCRYPTION_IMPLEMENTATIONS
