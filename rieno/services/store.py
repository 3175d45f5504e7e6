from rieno.services.demo_store import DemoStore
from rieno.utils.logging_utils import get_logger
from rieno.utils.supabase_utils import SupabaseStore

logger = get_logger("store")


def build_store(settings):
    if settings.demo_mode:
        logger.info("Demo mode: serving sample data")
        return DemoStore(settings)
    if not settings.supabase_configured:
        logger.error("Missing required environment variables: SUPABASE_URL and/or SUPABASE_SERVICE_ROLE_KEY")
    return SupabaseStore(settings)
