import logging

FORMAT = '%(asctime)s - %(message)s'

# Set up loggers
def configure_logging(settings):
    formatter = logging.Formatter(FORMAT)
    if settings.log_file:
        handler = logging.FileHandler(settings.log_file)
    else:
        # Logging in the terminal
        handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger("rieno")
    root.setLevel(settings.log_level)
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    return root


def get_logger(name):
    return logging.getLogger(f"rieno.{name}")


remote_logger = get_logger("supabase_calls")

def log_supabase_call(endpoint_name, details=""):
    remote_logger.info(f"SUPABASE CALL: {endpoint_name} | {details}")
